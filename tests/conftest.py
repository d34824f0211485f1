"""Shared test fixtures - setlists and raw rows with no I/O."""

import pytest

from phishpicks.config import settings
from phishpicks.domain.entities import PredictedSetlist, ProcessedSetlist
from tests.builders import actual


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path, monkeypatch):
    """Keep CLI log files out of the working tree."""
    monkeypatch.setattr(settings.logging, "log_file", tmp_path / "phishpicks.log")


@pytest.fixture
def empty_prediction():
    return PredictedSetlist()


@pytest.fixture
def empty_setlist():
    return ProcessedSetlist()


@pytest.fixture
def summer_show():
    """Actual setlist modelled on a typical summer tour show."""
    return actual(
        set1=["Sample in a Jar", "Bathtub Gin", "Sand", "Divided Sky", "Run Like an Antelope"],
        set2=["Down with Disease", "Tweezer", "Ghost", "Harry Hood"],
        encore=["Loving Cup", "Tweezer Reprise"],
    )


@pytest.fixture
def raw_show_rows():
    """Phish.net style rows: 1-based positions, set labels, extra fields."""
    return [
        {"showid": 1, "song": "Tweezer", "set": "1", "position": "1", "slug": "tweezer"},
        {"showid": 1, "song": "Mike's Song", "set": "2", "position": "2"},
        {"showid": 1, "song": "Fee", "set": "2", "position": "1"},
        {"showid": 1, "song": "Tweezer Reprise", "set": "e", "position": "1"},
    ]
