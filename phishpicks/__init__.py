"""phishpicks - scoring engine for the Phish setlist prediction game."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("phishpicks")
except PackageNotFoundError:
    # Development environment fallback
    __version__ = "0.1.0-dev"

__license__ = "MIT"
