"""Score every prediction submitted for one show.

Used once a show's setlist is final: each stored prediction is scored
independently against the same actual setlist and the results are ranked
highest score first. Persisting the new scores is left to the caller.
"""

from attrs import define, field

from phishpicks.application.models import ScoredPrediction, StoredPrediction
from phishpicks.config import get_logger
from phishpicks.domain.entities import ProcessedSetlist
from phishpicks.domain.errors import InvalidInputError
from phishpicks.domain.scoring import (
    LeaderboardEntry,
    ShowScore,
    rank_show,
    score_prediction,
)

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class ScoreShowPredictionsCommand:
    """Everything needed to score the predictions for one show."""

    show_id: str
    actual_setlist: ProcessedSetlist
    predictions: list[StoredPrediction] = field(factory=list)

    def __attrs_post_init__(self) -> None:
        """Validate command parameters."""
        if not self.show_id:
            raise ValueError("Show ID must be specified")
        if self.actual_setlist is None:
            raise InvalidInputError("Actual setlist must be provided")


@define(frozen=True, slots=True)
class ScoreShowPredictionsResult:
    """Ranked scores plus counters for reporting."""

    show_id: str
    scored: list[ScoredPrediction] = field(factory=list)
    processed: int = 0
    updated: int = 0
    errors: list[str] = field(factory=list)

    @property
    def leaderboard(self) -> list[LeaderboardEntry]:
        return rank_show(
            ShowScore(
                user_id=s.user_id,
                show_id=self.show_id,
                score=s.new_score,
                user_name=s.user_name,
            )
            for s in self.scored
        )

    def as_dict(self) -> dict:
        return {
            "showId": self.show_id,
            "processed": self.processed,
            "updated": self.updated,
            "errors": list(self.errors),
            "scoredPredictions": [s.as_dict() for s in self.scored],
        }


@define(slots=True)
class ScoreShowPredictionsUseCase:
    """Batch scoring of a show's predictions.

    A prediction that cannot be scored is recorded in ``errors`` and the rest
    of the batch continues.
    """

    def execute(self, command: ScoreShowPredictionsCommand) -> ScoreShowPredictionsResult:
        logger.info(
            f"Scoring {len(command.predictions)} predictions for show {command.show_id}"
        )

        scored: list[ScoredPrediction] = []
        errors: list[str] = []
        for prediction in command.predictions:
            if prediction.setlist is None:
                errors.append(
                    f"Prediction {prediction.prediction_id}: "
                    f"{prediction.error or 'missing setlist'}"
                )
                continue
            try:
                breakdown = score_prediction(prediction.setlist, command.actual_setlist)
            except InvalidInputError as e:
                errors.append(f"Prediction {prediction.prediction_id}: {e}")
                continue
            scored.append(
                ScoredPrediction(
                    prediction_id=prediction.prediction_id,
                    user_id=prediction.user_id,
                    previous_score=prediction.previous_score,
                    breakdown=breakdown,
                    user_name=prediction.user_name,
                )
            )

        # sorted() is stable, so equal scores keep submission order
        scored = sorted(scored, key=lambda s: s.new_score, reverse=True)
        updated = sum(1 for s in scored if s.changed)

        if errors:
            logger.warning(
                f"Show {command.show_id}: {len(errors)} predictions could not be scored"
            )
        logger.info(
            f"Show {command.show_id}: scored {len(scored)}, {updated} changed"
        )

        return ScoreShowPredictionsResult(
            show_id=command.show_id,
            scored=scored,
            processed=len(command.predictions),
            updated=updated,
            errors=errors,
        )
