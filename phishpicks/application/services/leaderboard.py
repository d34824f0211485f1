"""Leaderboards built from batch scoring results."""

from collections.abc import Iterable

from phishpicks.application.use_cases.score_show import ScoreShowPredictionsResult
from phishpicks.config import get_logger, settings
from phishpicks.domain.scoring import LeaderboardEntry, ShowScore, aggregate_tour, top

logger = get_logger(__name__)


def show_leaderboard(
    result: ScoreShowPredictionsResult, limit: int | None = None
) -> list[LeaderboardEntry]:
    """Ranked users for one scored show."""
    return top(result.leaderboard, limit or settings.output.leaderboard_limit)


def tour_leaderboard(
    results: Iterable[ScoreShowPredictionsResult], limit: int | None = None
) -> list[LeaderboardEntry]:
    """Ranked users by total score across every show of a tour."""
    scores = [
        ShowScore(
            user_id=scored.user_id,
            show_id=result.show_id,
            score=scored.new_score,
            user_name=scored.user_name,
        )
        for result in results
        for scored in result.scored
    ]
    entries = aggregate_tour(scores)
    logger.debug(f"Tour leaderboard: {len(entries)} users from {len(scores)} scores")
    return top(entries, limit or settings.output.leaderboard_limit)
