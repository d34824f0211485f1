"""Setlist domain entities.

Predicted and actual setlists share the same three-set shape. Song identity for
scoring is the song name, compared case-insensitively.
"""

from collections.abc import Iterator
from typing import Any, Literal

from attrs import define, field, validators

SetKey = Literal["set1", "set2", "encore"]

# Fixed processing order; also the order details appear in a breakdown
SET_KEYS: tuple[SetKey, ...] = ("set1", "set2", "encore")


def song_key(name: str) -> str:
    """Normalize a song name for identity comparison."""
    return name.lower()


@define(frozen=True, slots=True)
class SongRef:
    """A song picked by a user. Only ``name`` takes part in scoring."""

    id: str | int
    name: str = field(validator=validators.instance_of(str))
    slug: str | None = field(default=None)
    times_played: int | None = field(default=None)


@define(frozen=True, slots=True)
class PredictedSlot:
    """One ordered slot of a predicted set. ``song`` is None for an empty pick."""

    position: int = field(validator=validators.instance_of(int))
    song: SongRef | None = field(
        default=None,
        validator=validators.optional(validators.instance_of(SongRef)),
    )


def _slot_tuple(value: Any) -> tuple[PredictedSlot, ...]:
    return tuple(value)


@define(frozen=True, slots=True)
class PredictedSetlist:
    """A user's prediction for one show."""

    set1: tuple[PredictedSlot, ...] = field(factory=tuple, converter=_slot_tuple)
    set2: tuple[PredictedSlot, ...] = field(factory=tuple, converter=_slot_tuple)
    encore: tuple[PredictedSlot, ...] = field(factory=tuple, converter=_slot_tuple)

    def get_set(self, set_key: SetKey) -> tuple[PredictedSlot, ...]:
        return getattr(self, set_key)


@define(frozen=True, slots=True)
class ActualSongEntry:
    """One song actually played, 0-indexed within its set."""

    name: str = field(validator=validators.instance_of(str))
    position: int = field(validator=validators.instance_of(int))

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "position": self.position}


def _sorted_entries(value: Any) -> tuple[ActualSongEntry, ...]:
    return tuple(sorted(value, key=lambda entry: entry.position))


def _unique_positions(
    instance: Any, attribute: Any, value: tuple[ActualSongEntry, ...]
) -> None:
    positions = [entry.position for entry in value]
    if len(positions) != len(set(positions)):
        raise ValueError(f"{attribute.name} contains duplicate positions: {positions}")


@define(frozen=True, slots=True)
class ProcessedSetlist:
    """Canonical, immutable ground truth for one show.

    Entries in each set are kept sorted by position. Gaps between positions
    are legal; duplicate positions are not.
    """

    set1: tuple[ActualSongEntry, ...] = field(
        factory=tuple, converter=_sorted_entries, validator=_unique_positions
    )
    set2: tuple[ActualSongEntry, ...] = field(
        factory=tuple, converter=_sorted_entries, validator=_unique_positions
    )
    encore: tuple[ActualSongEntry, ...] = field(
        factory=tuple, converter=_sorted_entries, validator=_unique_positions
    )

    def get_set(self, set_key: SetKey) -> tuple[ActualSongEntry, ...]:
        return getattr(self, set_key)

    def iter_songs(self) -> Iterator[tuple[SetKey, ActualSongEntry]]:
        """Yield ``(set_key, entry)`` for every song in set order."""
        for set_key in SET_KEYS:
            for entry in self.get_set(set_key):
                yield set_key, entry

    @property
    def song_count(self) -> int:
        return len(self.set1) + len(self.set2) + len(self.encore)

    def as_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            set_key: [entry.as_dict() for entry in self.get_set(set_key)]
            for set_key in SET_KEYS
        }
