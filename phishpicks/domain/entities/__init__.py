"""Core domain entities representing setlists and scoring results."""

from .breakdown import CategoryTally, ScoredSongDetail, ScoringBreakdown
from .setlist import (
    SET_KEYS,
    ActualSongEntry,
    PredictedSetlist,
    PredictedSlot,
    ProcessedSetlist,
    SetKey,
    SongRef,
    song_key,
)

__all__ = [
    # Setlist entities
    "SET_KEYS",
    "ActualSongEntry",
    "PredictedSetlist",
    "PredictedSlot",
    "ProcessedSetlist",
    "SetKey",
    "SongRef",
    "song_key",
    # Scoring output
    "CategoryTally",
    "ScoredSongDetail",
    "ScoringBreakdown",
]
