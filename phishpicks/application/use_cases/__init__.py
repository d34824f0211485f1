"""Application use cases - orchestrate business operations."""

from .score_show import (
    ScoreShowPredictionsCommand,
    ScoreShowPredictionsResult,
    ScoreShowPredictionsUseCase,
)

__all__ = [
    "ScoreShowPredictionsCommand",
    "ScoreShowPredictionsResult",
    "ScoreShowPredictionsUseCase",
]
