"""CLI test fixtures - JSON input files and a runner with clean log sinks."""

import json

from loguru import logger
import pytest
from typer.testing import CliRunner

from phishpicks.config import settings


@pytest.fixture
def runner(monkeypatch):
    """CLI test runner with console logging kept out of captured output."""
    monkeypatch.setattr(settings.logging, "console_level", "CRITICAL")
    yield CliRunner()
    # Sinks added by the app callback point at the runner's closed streams
    logger.remove()


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document into tmp_path and return its path."""

    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def setlist_file(write_json):
    return write_json(
        "2024-07-12.json",
        {
            "set1": [{"name": "Tweezer", "position": 0}, {"name": "Sand", "position": 1}],
            "set2": [{"name": "Ghost", "position": 0}],
            "encore": [{"name": "Tweezer Reprise", "position": 0}],
        },
    )


@pytest.fixture
def prediction_file(write_json):
    return write_json(
        "prediction.json",
        {
            "set1": [{"position": 0, "song": {"id": 1, "name": "Tweezer"}}],
            "set2": [],
            "encore": [],
        },
    )
