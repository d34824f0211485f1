"""Tests for the prediction scoring algorithm.

These tests verify the tier decision for each predicted song and the
invariants of the resulting breakdown.
"""

import pytest

from phishpicks.domain.entities import (
    ActualSongEntry,
    PredictedSetlist,
    PredictedSlot,
    ProcessedSetlist,
    SongRef,
)
from phishpicks.domain.errors import InvalidInputError
from phishpicks.domain.rules import POINT_VALUES, ScoringCategory
from phishpicks.domain.scoring import score_prediction
from tests.builders import actual, prediction


def single_pick(set_key: str, position: int, name: str) -> PredictedSetlist:
    slot = PredictedSlot(position=position, song=SongRef(id=1, name=name))
    return PredictedSetlist(**{set_key: [slot]})


class TestScoringScenarios:
    """One predicted song per scenario, one tier each."""

    def test_opener_in_correct_position(self):
        """An exact opener earns the special tier."""
        result = score_prediction(
            single_pick("set1", 0, "Tweezer"),
            ProcessedSetlist(set1=[ActualSongEntry(name="Tweezer", position=0)]),
        )

        assert result.correct_special.count == 1
        assert result.correct_special.points == 15
        assert result.total_score == 15
        assert result.details[0].reason == "Opener in correct position"

    def test_song_in_set_wrong_position(self):
        """A song played elsewhere in the same set earns 6 points."""
        result = score_prediction(
            single_pick("set1", 3, "Bathtub Gin"),
            actual(set1=["Chalk Dust Torture", "Bathtub Gin", "Sand", "Fee", "Llama"]),
        )

        assert result.song_in_set.count == 1
        assert result.song_in_set.points == 6
        assert result.total_score == 6
        assert result.details[0].reason == "Song in correct set, wrong position"

    def test_encore_song_in_wrong_position(self):
        """Encore songs anywhere in the encore still earn 10 points."""
        result = score_prediction(
            single_pick("encore", 0, "Tweezer Reprise"),
            ProcessedSetlist(encore=[ActualSongEntry(name="Tweezer Reprise", position=1)]),
        )

        assert result.encore_in_set.count == 1
        assert result.encore_in_set.points == 10
        assert result.total_score == 10
        assert result.details[0].reason == "Encore song in wrong position"

    def test_song_in_show_wrong_set(self):
        """A song played in a different set earns 3 points."""
        result = score_prediction(
            single_pick("set1", 2, "Sand"),
            ProcessedSetlist(set2=[ActualSongEntry(name="Sand", position=0)]),
        )

        assert result.song_in_show.count == 1
        assert result.song_in_show.points == 3
        assert result.total_score == 3
        detail = result.details[0]
        assert detail.reason == "Song in show, wrong set"
        assert detail.actual_set == "set2"
        assert detail.actual_position == 0

    def test_song_not_played(self):
        """A song missing from the show scores nothing but is still explained."""
        result = score_prediction(
            single_pick("set1", 0, "Ghost"),
            actual(set1=["Tweezer"], set2=["Sand"], encore=["Fee"]),
        )

        assert result.total_score == 0
        assert all(t.count == 0 for t in result.categories.values())
        assert len(result.details) == 1
        detail = result.details[0]
        assert detail.points == 0
        assert detail.reason == "Song not played"
        assert detail.category is None
        assert detail.actual_set is None
        assert detail.actual_position is None

    def test_correct_song_correct_position(self):
        """An exact match in the middle of a set earns 10 points."""
        result = score_prediction(
            prediction(set1=["Fee", "Sand", "Llama"]),
            actual(set1=["Chalk Dust Torture", "Sand", "Divided Sky", "Possum"]),
        )

        sand = result.details[1]
        assert sand.points == 10
        assert sand.category == ScoringCategory.CORRECT_SONG
        assert sand.reason == "Correct song, correct position"

    def test_closer_in_correct_position(self):
        """The last predicted slot matching the actual closer earns 15 points."""
        result = score_prediction(
            prediction(set1=["Fee", "Sand", "Run Like an Antelope"]),
            actual(set1=["Llama", "Possum", "Run Like an Antelope"]),
        )

        closer = result.details[2]
        assert closer.points == 15
        assert closer.reason == "Closer in correct position"

    def test_every_exact_encore_song_is_special(self):
        """Any exact encore match earns the special tier, not just openers."""
        result = score_prediction(
            prediction(encore=["Loving Cup", "Tweezer Reprise", "Fee"]),
            actual(encore=["Loving Cup", "Tweezer Reprise"]),
        )

        assert [d.points for d in result.details] == [15, 15, 0]
        assert result.details[1].reason == "Encore in correct position"
        assert result.correct_special.count == 2


class TestCloserQuirks:
    """Closer detection uses the predicted set length."""

    def test_trailing_empty_slot_denies_closer_credit(self):
        """Empty slots still count toward the predicted set length."""
        result = score_prediction(
            prediction(set1=["Fee", "Sand", "Run Like an Antelope", None]),
            actual(set1=["Llama", "Possum", "Run Like an Antelope"]),
        )

        assert result.details[2].points == 10
        assert result.details[2].category == ScoringCategory.CORRECT_SONG

    def test_longer_actual_set_denies_closer_credit(self):
        """Predicted closer matching an exact mid-set slot is a plain correct song."""
        result = score_prediction(
            prediction(set1=["Fee", "Sand", "Llama"]),
            actual(set1=["Possum", "Wolfman's Brother", "Llama", "Fluffhead", "Antelope"]),
        )

        assert result.details[2].points == 10

    def test_repeated_song_uses_first_occurrence_for_closer(self):
        """A song played twice in a set is judged by its first appearance."""
        result = score_prediction(
            prediction(set2=["Down with Disease", "Ghost", "Piper", "Tweezer"]),
            actual(set2=["Down with Disease", "Tweezer", "Ghost", "Tweezer"]),
        )

        assert result.details[3].points == 10
        assert result.details[3].category == ScoringCategory.CORRECT_SONG


class TestScoringProperties:
    """Invariants that hold for every prediction."""

    def test_null_slots_are_excluded(self, summer_show):
        result = score_prediction(
            prediction(set1=[None, "Bathtub Gin", None], encore=[None]), summer_show
        )

        assert len(result.details) == 1
        assert result.details[0].song_name == "Bathtub Gin"
        assert result.total_score == 10

    def test_mixed_prediction_breakdown(self, summer_show):
        """A realistic prediction lands in every tier except correctSong."""
        result = score_prediction(
            prediction(
                set1=["Sample in a Jar", "Sand", "Bathtub Gin", "Tweezer", "Run Like an Antelope"],
                set2=["Down with Disease", "Ghost", "Tweezer", "Fluffhead"],
                encore=["Tweezer Reprise", None],
            ),
            summer_show,
        )

        assert [d.points for d in result.details] == [15, 6, 6, 3, 15, 15, 6, 6, 0, 10]
        assert result.correct_special.count == 3
        assert result.song_in_set.count == 4
        assert result.song_in_show.count == 1
        assert result.encore_in_set.count == 1
        assert result.correct_song.count == 0
        assert result.total_score == 82

    def test_total_is_sum_of_categories(self, summer_show):
        result = score_prediction(
            prediction(
                set1=["Sand", "Ghost", "Divided Sky"],
                set2=["Tweezer", "Down with Disease"],
                encore=["Loving Cup"],
            ),
            summer_show,
        )

        assert result.total_score == sum(t.points for t in result.categories.values())
        for category, tally in result.categories.items():
            assert tally.points == tally.count * POINT_VALUES[category]
        assert result.total_score == sum(d.points for d in result.details)

    def test_scoring_is_idempotent(self, summer_show):
        pick = prediction(set1=["Sand", "Tweezer"], encore=["Tweezer Reprise"])

        first = score_prediction(pick, summer_show)
        second = score_prediction(pick, summer_show)

        assert first == second
        assert first.as_dict() == second.as_dict()

    @pytest.mark.parametrize("actual_name", ["tweezer", "TWEEZER", "Tweezer"])
    def test_names_match_case_insensitively(self, actual_name):
        result = score_prediction(
            single_pick("set1", 0, "Tweezer"),
            ProcessedSetlist(set1=[ActualSongEntry(name=actual_name, position=0)]),
        )

        assert result.total_score == 15

    def test_exact_match_beats_show_match(self):
        """A song also played in another set still gets exact-position credit."""
        result = score_prediction(
            prediction(set2=["Ghost", "Tweezer", "Harry Hood"]),
            actual(set1=["Tweezer", "Sand"], set2=["Ghost", "Tweezer", "Piper", "Hood"]),
        )

        tweezer = result.details[1]
        assert tweezer.points == 10
        # Explanation points at the first appearance in the show
        assert tweezer.actual_set == "set1"
        assert tweezer.actual_position == 0

    def test_empty_inputs(self, empty_prediction, empty_setlist):
        result = score_prediction(empty_prediction, empty_setlist)

        assert result.total_score == 0
        assert result.details == ()

    def test_nothing_played_yet(self, empty_setlist):
        result = score_prediction(prediction(set1=["Fee", "Sand"]), empty_setlist)

        assert result.total_score == 0
        assert [d.reason for d in result.details] == ["Song not played"] * 2

    def test_details_follow_set_order(self, summer_show):
        result = score_prediction(
            prediction(set1=["Sand"], set2=["Ghost"], encore=["Loving Cup"]),
            summer_show,
        )

        assert [d.predicted_set for d in result.details] == ["set1", "set2", "encore"]

    def test_scoring_ignores_informational_song_fields(self, summer_show):
        slot = PredictedSlot(
            position=0,
            song=SongRef(id="abc", name="Down with Disease", slug="dwd", times_played=400),
        )

        result = score_prediction(PredictedSetlist(set2=[slot]), summer_show)

        assert result.total_score == 15


class TestScoringInputValidation:
    """Top-level contract violations are reported as InvalidInputError."""

    def test_missing_prediction(self, empty_setlist):
        with pytest.raises(InvalidInputError):
            score_prediction(None, empty_setlist)

    def test_missing_actual(self, empty_prediction):
        with pytest.raises(InvalidInputError):
            score_prediction(empty_prediction, None)

    def test_untyped_payloads_are_rejected(self, empty_setlist):
        with pytest.raises(InvalidInputError, match="PredictedSetlist"):
            score_prediction({"set1": [], "set2": [], "encore": []}, empty_setlist)

    def test_invalid_input_is_a_value_error(self, empty_setlist):
        with pytest.raises(ValueError):
            score_prediction(None, empty_setlist)


class TestBreakdownSerialization:
    """JSON-compatible output shape."""

    def test_as_dict_shape(self, summer_show):
        result = score_prediction(
            prediction(set1=["Sample in a Jar"], set2=["Fluffhead"]), summer_show
        )

        data = result.as_dict()

        assert data["totalScore"] == 15
        assert data["correctSpecial"] == {"count": 1, "points": 15}
        assert data["songInShow"] == {"count": 0, "points": 0}
        assert set(data) == {
            "totalScore",
            "songInShow",
            "songInSet",
            "correctSong",
            "correctSpecial",
            "encoreInSet",
            "details",
        }
        assert data["details"][0] == {
            "songName": "Sample in a Jar",
            "predictedSet": "set1",
            "predictedPosition": 0,
            "actualSet": "set1",
            "actualPosition": 0,
            "points": 15,
            "reason": "Opener in correct position",
        }

    def test_unplayed_detail_omits_actual_fields(self, summer_show):
        data = score_prediction(prediction(set2=["Fluffhead"]), summer_show).as_dict()

        assert "actualSet" not in data["details"][0]
        assert "actualPosition" not in data["details"][0]