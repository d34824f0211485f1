"""Scoring output value objects."""

from typing import Any

from attrs import define, field

from phishpicks.domain.rules import POINT_VALUES, ScoringCategory


@define(frozen=True, slots=True)
class CategoryTally:
    """How many predictions landed in a tier and what they earned."""

    count: int = 0
    points: int = 0

    def as_dict(self) -> dict[str, int]:
        return {"count": self.count, "points": self.points}


@define(frozen=True, slots=True)
class ScoredSongDetail:
    """Explanation of the points one predicted song earned."""

    song_name: str
    predicted_set: str
    predicted_position: int
    points: int
    reason: str
    actual_set: str | None = None
    actual_position: int | None = None
    category: ScoringCategory | None = None

    def as_dict(self) -> dict[str, Any]:
        """Convert to the camelCase shape consumed by the web client."""
        result: dict[str, Any] = {
            "songName": self.song_name,
            "predictedSet": self.predicted_set,
            "predictedPosition": self.predicted_position,
        }
        if self.actual_set is not None:
            result["actualSet"] = self.actual_set
        if self.actual_position is not None:
            result["actualPosition"] = self.actual_position
        result["points"] = self.points
        result["reason"] = self.reason
        return result


@define(frozen=True, slots=True)
class ScoringBreakdown:
    """Full scoring result for one prediction against one show.

    ``total_score`` always equals the sum of the category points, and each
    category's points equal its count times the tier value.
    """

    song_in_show: CategoryTally = field(factory=CategoryTally)
    song_in_set: CategoryTally = field(factory=CategoryTally)
    correct_song: CategoryTally = field(factory=CategoryTally)
    correct_special: CategoryTally = field(factory=CategoryTally)
    encore_in_set: CategoryTally = field(factory=CategoryTally)
    details: tuple[ScoredSongDetail, ...] = field(factory=tuple, converter=tuple)

    @classmethod
    def from_details(cls, details: list[ScoredSongDetail]) -> "ScoringBreakdown":
        """Build a breakdown whose tallies are derived from the details."""
        counts = dict.fromkeys(ScoringCategory, 0)
        for detail in details:
            if detail.category is not None:
                counts[detail.category] += 1

        def tally(category: ScoringCategory) -> CategoryTally:
            return CategoryTally(
                count=counts[category],
                points=counts[category] * POINT_VALUES[category],
            )

        return cls(
            song_in_show=tally(ScoringCategory.SONG_IN_SHOW),
            song_in_set=tally(ScoringCategory.SONG_IN_SET),
            correct_song=tally(ScoringCategory.CORRECT_SONG),
            correct_special=tally(ScoringCategory.CORRECT_SPECIAL),
            encore_in_set=tally(ScoringCategory.ENCORE_IN_SET),
            details=details,
        )

    @property
    def categories(self) -> dict[ScoringCategory, CategoryTally]:
        return {
            ScoringCategory.SONG_IN_SHOW: self.song_in_show,
            ScoringCategory.SONG_IN_SET: self.song_in_set,
            ScoringCategory.CORRECT_SONG: self.correct_song,
            ScoringCategory.CORRECT_SPECIAL: self.correct_special,
            ScoringCategory.ENCORE_IN_SET: self.encore_in_set,
        }

    @property
    def total_score(self) -> int:
        return sum(tally.points for tally in self.categories.values())

    def as_dict(self) -> dict[str, Any]:
        """Convert to the JSON-compatible breakdown shape."""
        result: dict[str, Any] = {"totalScore": self.total_score}
        for category, tally in self.categories.items():
            result[category.value] = tally.as_dict()
        result["details"] = [detail.as_dict() for detail in self.details]
        return result
