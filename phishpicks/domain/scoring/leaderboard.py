"""Leaderboard ranking over scored predictions.

Equal scores share a rank and the next rank skips ahead (1, 1, 3).
"""

from collections.abc import Iterable

from attrs import define, evolve, field, validators


@define(frozen=True, slots=True)
class ShowScore:
    """One user's score for one show."""

    user_id: int | str
    show_id: str
    score: int | None
    user_name: str = ""


@define(frozen=True, slots=True)
class LeaderboardEntry:
    """A ranked row of a show or tour leaderboard."""

    user_id: int | str
    score: int
    rank: int = 0
    user_name: str = ""
    shows_participated: int = field(default=1, validator=validators.ge(0))

    def as_dict(self) -> dict[str, int | str]:
        return {
            "rank": self.rank,
            "userId": self.user_id,
            "userName": self.user_name,
            "score": self.score,
            "showsParticipated": self.shows_participated,
        }


def _assign_ranks(entries: Iterable[LeaderboardEntry]) -> list[LeaderboardEntry]:
    ordered = sorted(entries, key=lambda e: (-e.score, str(e.user_id)))
    ranked: list[LeaderboardEntry] = []
    for index, entry in enumerate(ordered):
        if ranked and ranked[-1].score == entry.score:
            rank = ranked[-1].rank
        else:
            rank = index + 1
        ranked.append(evolve(entry, rank=rank))
    return ranked


def rank_show(scores: Iterable[ShowScore]) -> list[LeaderboardEntry]:
    """Rank users by their score for a single show. Unscored entries are skipped."""
    return _assign_ranks(
        LeaderboardEntry(user_id=s.user_id, score=s.score, user_name=s.user_name)
        for s in scores
        if s.score is not None
    )


def aggregate_tour(scores: Iterable[ShowScore]) -> list[LeaderboardEntry]:
    """Sum scores per user across the shows of a tour and rank the totals."""
    totals: dict[int | str, LeaderboardEntry] = {}
    for s in scores:
        if s.score is None:
            continue
        current = totals.get(s.user_id)
        if current is None:
            totals[s.user_id] = LeaderboardEntry(
                user_id=s.user_id, score=s.score, user_name=s.user_name
            )
        else:
            totals[s.user_id] = evolve(
                current,
                score=current.score + s.score,
                shows_participated=current.shows_participated + 1,
                user_name=current.user_name or s.user_name,
            )
    return _assign_ranks(totals.values())


def top(entries: list[LeaderboardEntry], limit: int) -> list[LeaderboardEntry]:
    """Return the first ``limit`` ranked entries."""
    if limit <= 0:
        raise ValueError(f"Leaderboard limit must be positive, got {limit}")
    return entries[:limit]
