"""Normalization of raw setlist rows into a canonical ``ProcessedSetlist``.

Upstream concert data lists every song as a flat row with a set label and a
1-based position. Rows the game cannot score are dropped rather than treated
as errors:

- set labels other than ``"1"``, ``"2"`` and ``"e"`` (soundcheck, second
  encores and similar)
- positions that do not start with an integer or that fall below 1; a
  string is read up to its first non-digit, so "2.0" and " 3 " are
  positions 2 and 3
- a row whose position is already taken in its set; the first row wins
"""

from collections.abc import Iterable, Mapping
import re
from typing import Any

from phishpicks.config import get_logger
from phishpicks.domain.entities.setlist import (
    ActualSongEntry,
    ProcessedSetlist,
    SetKey,
)

logger = get_logger(__name__)

SET_LABELS: dict[str, SetKey] = {
    "1": "set1",
    "2": "set2",
    "e": "encore",
}

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _zero_based_position(raw_position: Any) -> int | None:
    """Convert a 1-based upstream position to 0-based, None when unusable."""
    if isinstance(raw_position, bool):
        return None
    if isinstance(raw_position, int):
        position = raw_position - 1
    else:
        match = _LEADING_INTEGER.match(str(raw_position))
        if match is None:
            return None
        position = int(match.group(1)) - 1
    return position if position >= 0 else None


def normalize_setlist(raw_entries: Iterable[Mapping[str, Any]]) -> ProcessedSetlist:
    """Group raw ``{song, set, position}`` rows into a canonical setlist.

    Args:
        raw_entries: Upstream rows; may be empty when a show has no data yet.

    Returns:
        ProcessedSetlist with each set sorted by 0-based position. All three
        sets are present even when empty.
    """
    buckets: dict[SetKey, dict[int, ActualSongEntry]] = {
        set_key: {} for set_key in SET_LABELS.values()
    }
    dropped = 0

    for row in raw_entries:
        set_key = SET_LABELS.get(str(row.get("set", "")))
        if set_key is None:
            dropped += 1
            continue

        name = row.get("song")
        position = _zero_based_position(row.get("position"))
        if not isinstance(name, str) or position is None:
            logger.debug(f"Dropping unusable setlist row: {dict(row)}")
            dropped += 1
            continue

        bucket = buckets[set_key]
        if position in bucket:
            logger.warning(
                f"Duplicate position {position} in {set_key}: keeping "
                f"{bucket[position].name!r}, dropping {name!r}"
            )
            dropped += 1
            continue

        bucket[position] = ActualSongEntry(name=name, position=position)

    processed = ProcessedSetlist(
        set1=buckets["set1"].values(),
        set2=buckets["set2"].values(),
        encore=buckets["encore"].values(),
    )
    logger.debug(
        f"Normalized setlist: {processed.song_count} songs kept, {dropped} rows dropped"
    )
    return processed
