"""Configuration module for phishpicks.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

log_startup_info() -> None
    Log the active configuration at debug level

Usage:
------
```python
from phishpicks.config import get_logger, settings

logger = get_logger(__name__)
logger.info("Scoring show", show_id="1718730981")
limit = settings.output.leaderboard_limit
```
"""

from .logging import get_logger, log_startup_info, setup_loguru_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "get_logger",
    "log_startup_info",
    "settings",
    "setup_loguru_logger",
]
