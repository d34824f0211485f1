"""Point table for the setlist prediction game.

These values are game rules shown to players, not tunables.
"""

from enum import StrEnum


class ScoringCategory(StrEnum):
    """Reward tiers, valued as they appear in serialized breakdowns."""

    SONG_IN_SHOW = "songInShow"
    SONG_IN_SET = "songInSet"
    CORRECT_SONG = "correctSong"
    CORRECT_SPECIAL = "correctSpecial"
    ENCORE_IN_SET = "encoreInSet"


POINT_VALUES: dict[ScoringCategory, int] = {
    ScoringCategory.CORRECT_SPECIAL: 15,  # exact position AND opener/closer/encore
    ScoringCategory.CORRECT_SONG: 10,  # exact position
    ScoringCategory.ENCORE_IN_SET: 10,  # encore song, wrong position
    ScoringCategory.SONG_IN_SET: 6,  # right set, wrong position
    ScoringCategory.SONG_IN_SHOW: 3,  # played in another set
}

# Human readable descriptions, in tier priority order
RULE_DESCRIPTIONS: dict[ScoringCategory, str] = {
    ScoringCategory.CORRECT_SPECIAL: "Opener, closer or encore song in the exact position",
    ScoringCategory.CORRECT_SONG: "Correct song in the exact position",
    ScoringCategory.ENCORE_IN_SET: "Encore song played in the encore, wrong position",
    ScoringCategory.SONG_IN_SET: "Song played in the predicted set, wrong position",
    ScoringCategory.SONG_IN_SHOW: "Song played in the show, different set",
}

REASON_CORRECT_POSITION = "Correct song, correct position"
REASON_ENCORE_WRONG_POSITION = "Encore song in wrong position"
REASON_SET_WRONG_POSITION = "Song in correct set, wrong position"
REASON_WRONG_SET = "Song in show, wrong set"
REASON_NOT_PLAYED = "Song not played"


def special_reason(slot_kind: str) -> str:
    """Reason text for the special tier, e.g. ``"Opener in correct position"``."""
    return f"{slot_kind} in correct position"
