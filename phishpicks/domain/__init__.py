"""phishpicks domain layer - pure scoring logic with no I/O."""

from . import entities, rules, scoring
from .entities import (
    ActualSongEntry,
    PredictedSetlist,
    PredictedSlot,
    ProcessedSetlist,
    ScoringBreakdown,
    SongRef,
)
from .errors import InvalidInputError
from .rules import POINT_VALUES, ScoringCategory
from .scoring import normalize_setlist, score_prediction

__all__ = [
    # Modules
    "entities",
    "rules",
    "scoring",
    # Key domain types
    "ActualSongEntry",
    "InvalidInputError",
    "PredictedSetlist",
    "PredictedSlot",
    "ProcessedSetlist",
    "ScoringBreakdown",
    "SongRef",
    # Rules
    "POINT_VALUES",
    "ScoringCategory",
    # Algorithms
    "normalize_setlist",
    "score_prediction",
]
