"""Setlist normalization, prediction scoring and leaderboard ranking."""

from .algorithms import score_prediction
from .leaderboard import (
    LeaderboardEntry,
    ShowScore,
    aggregate_tour,
    rank_show,
    top,
)
from .normalization import SET_LABELS, normalize_setlist

__all__ = [
    "SET_LABELS",
    "LeaderboardEntry",
    "ShowScore",
    "aggregate_tour",
    "normalize_setlist",
    "rank_show",
    "score_prediction",
    "top",
]
