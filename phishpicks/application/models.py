"""Application-level records passed between the storage boundary and use cases."""

from attrs import define

from phishpicks.domain.entities import PredictedSetlist, ScoringBreakdown


@define(frozen=True, slots=True)
class StoredPrediction:
    """A user's persisted prediction for one show.

    ``setlist`` is None when the stored payload failed validation; ``error``
    then says why.
    """

    prediction_id: int | str
    user_id: int | str
    setlist: PredictedSetlist | None
    previous_score: int | None = None
    user_name: str = ""
    error: str | None = None


@define(frozen=True, slots=True)
class ScoredPrediction:
    """Outcome of scoring one stored prediction."""

    prediction_id: int | str
    user_id: int | str
    previous_score: int | None
    breakdown: ScoringBreakdown
    user_name: str = ""

    @property
    def new_score(self) -> int:
        return self.breakdown.total_score

    @property
    def changed(self) -> bool:
        return self.previous_score != self.new_score

    def as_dict(self) -> dict:
        return {
            "predictionId": self.prediction_id,
            "userId": self.user_id,
            "userName": self.user_name,
            "originalScore": self.previous_score,
            "newScore": self.new_score,
            "details": self.breakdown.as_dict(),
        }
