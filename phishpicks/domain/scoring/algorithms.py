"""Pure algorithm for scoring a setlist prediction against the actual show.

A predicted song is compared with the actual setlist at three levels, from
most to least specific: exact position within the same set, anywhere in the
same set, and anywhere in the show. The most specific level that matches
decides the reward tier (see ``phishpicks.domain.rules``).
"""

from attrs import define

from phishpicks.config import get_logger
from phishpicks.domain.entities.breakdown import ScoredSongDetail, ScoringBreakdown
from phishpicks.domain.entities.setlist import (
    SET_KEYS,
    ActualSongEntry,
    PredictedSetlist,
    PredictedSlot,
    ProcessedSetlist,
    SetKey,
    song_key,
)
from phishpicks.domain.errors import InvalidInputError
from phishpicks.domain.rules import (
    POINT_VALUES,
    REASON_CORRECT_POSITION,
    REASON_ENCORE_WRONG_POSITION,
    REASON_NOT_PLAYED,
    REASON_SET_WRONG_POSITION,
    REASON_WRONG_SET,
    ScoringCategory,
    special_reason,
)

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class _ShowSong:
    """Actual song tagged with the set it was played in."""

    set_key: SetKey
    entry: ActualSongEntry


def _find_in_set(
    actual_set: tuple[ActualSongEntry, ...], name_key: str
) -> ActualSongEntry | None:
    return next((e for e in actual_set if song_key(e.name) == name_key), None)


def _find_at_position(
    actual_set: tuple[ActualSongEntry, ...], name_key: str, position: int
) -> ActualSongEntry | None:
    return next(
        (
            e
            for e in actual_set
            if song_key(e.name) == name_key and e.position == position
        ),
        None,
    )


def _score_slot(
    slot: PredictedSlot,
    set_key: SetKey,
    predicted_set_length: int,
    actual_set: tuple[ActualSongEntry, ...],
    show_songs: list[_ShowSong],
) -> ScoredSongDetail:
    """Decide the reward tier for one non-empty predicted slot."""
    song_name = slot.song.name
    name_key = song_key(song_name)
    position = slot.position

    is_opener = position == 0
    # Measured against the predicted set, not the actual one
    is_closer = position == predicted_set_length - 1

    exact_match = _find_at_position(actual_set, name_key, position)
    set_match = _find_in_set(actual_set, name_key)
    show_match = next((s for s in show_songs if song_key(s.entry.name) == name_key), None)

    is_actual_opener = set_match is not None and set_match.position == 0
    is_actual_closer = (
        set_match is not None and set_match.position == len(actual_set) - 1
    )

    category: ScoringCategory | None
    if exact_match is not None:
        if set_key == "encore":
            category, reason = ScoringCategory.CORRECT_SPECIAL, special_reason("Encore")
        elif is_opener and is_actual_opener:
            category, reason = ScoringCategory.CORRECT_SPECIAL, special_reason("Opener")
        elif is_closer and is_actual_closer:
            category, reason = ScoringCategory.CORRECT_SPECIAL, special_reason("Closer")
        else:
            category, reason = ScoringCategory.CORRECT_SONG, REASON_CORRECT_POSITION
    elif set_match is not None:
        if set_key == "encore":
            category, reason = ScoringCategory.ENCORE_IN_SET, REASON_ENCORE_WRONG_POSITION
        else:
            category, reason = ScoringCategory.SONG_IN_SET, REASON_SET_WRONG_POSITION
    elif show_match is not None:
        category, reason = ScoringCategory.SONG_IN_SHOW, REASON_WRONG_SET
    else:
        category, reason = None, REASON_NOT_PLAYED

    return ScoredSongDetail(
        song_name=song_name,
        predicted_set=set_key,
        predicted_position=position,
        points=POINT_VALUES[category] if category is not None else 0,
        reason=reason,
        actual_set=show_match.set_key if show_match else None,
        actual_position=show_match.entry.position if show_match else None,
        category=category,
    )


def score_prediction(
    prediction: PredictedSetlist, actual: ProcessedSetlist
) -> ScoringBreakdown:
    """Score a prediction against the setlist that was actually played.

    Args:
        prediction: The user's predicted setlist. Empty slots are ignored.
        actual: Canonical setlist for the show, usually from ``normalize_setlist``.

    Returns:
        Breakdown with one detail per non-empty predicted slot, in
        set1, set2, encore order.

    Raises:
        InvalidInputError: prediction or actual is missing or of the wrong type.
    """
    if prediction is None or actual is None:
        raise InvalidInputError("Prediction and actual setlist are both required")
    if not isinstance(prediction, PredictedSetlist):
        raise InvalidInputError(
            f"Prediction must be a PredictedSetlist, got {type(prediction).__name__}"
        )
    if not isinstance(actual, ProcessedSetlist):
        raise InvalidInputError(
            f"Actual setlist must be a ProcessedSetlist, got {type(actual).__name__}"
        )

    show_songs = [_ShowSong(set_key, entry) for set_key, entry in actual.iter_songs()]

    details: list[ScoredSongDetail] = []
    for set_key in SET_KEYS:
        predicted_set = prediction.get_set(set_key)
        actual_set = actual.get_set(set_key)
        set_details = [
            _score_slot(slot, set_key, len(predicted_set), actual_set, show_songs)
            for slot in predicted_set
            if slot.song is not None
        ]
        logger.debug(
            f"Scored {set_key}: {len(set_details)} picks, "
            f"{sum(d.points for d in set_details)} points"
        )
        details.extend(set_details)

    return ScoringBreakdown.from_details(details)
