"""Tests for show and tour leaderboard ranking."""

import pytest

from phishpicks.domain.scoring import ShowScore, aggregate_tour, rank_show, top


class TestRankShow:
    def test_orders_by_score_descending(self):
        board = rank_show([
            ShowScore(user_id=1, show_id="s1", score=20),
            ShowScore(user_id=2, show_id="s1", score=45),
            ShowScore(user_id=3, show_id="s1", score=31),
        ])

        assert [e.user_id for e in board] == [2, 3, 1]
        assert [e.rank for e in board] == [1, 2, 3]

    def test_ties_share_rank(self):
        board = rank_show([
            ShowScore(user_id=3, show_id="s1", score=30),
            ShowScore(user_id=1, show_id="s1", score=30),
            ShowScore(user_id=2, show_id="s1", score=12),
        ])

        assert [(e.user_id, e.rank) for e in board] == [(1, 1), (3, 1), (2, 3)]

    def test_unscored_predictions_are_skipped(self):
        board = rank_show([
            ShowScore(user_id=1, show_id="s1", score=None),
            ShowScore(user_id=2, show_id="s1", score=0),
        ])

        assert [e.user_id for e in board] == [2]

    def test_empty(self):
        assert rank_show([]) == []


class TestAggregateTour:
    def test_sums_scores_and_counts_shows(self):
        board = aggregate_tour([
            ShowScore(user_id=1, show_id="s1", score=20, user_name="wilson"),
            ShowScore(user_id=2, show_id="s1", score=40, user_name="icculus"),
            ShowScore(user_id=1, show_id="s2", score=30, user_name="wilson"),
            ShowScore(user_id=2, show_id="s2", score=None),
        ])

        assert [(e.user_id, e.score, e.shows_participated) for e in board] == [
            (1, 50, 2),
            (2, 40, 1),
        ]
        assert board[0].user_name == "wilson"

    def test_as_dict(self):
        board = aggregate_tour([ShowScore(user_id=7, show_id="s1", score=9, user_name="fee")])

        assert board[0].as_dict() == {
            "rank": 1,
            "userId": 7,
            "userName": "fee",
            "score": 9,
            "showsParticipated": 1,
        }


class TestTop:
    def test_limits_entries(self):
        board = rank_show(
            ShowScore(user_id=i, show_id="s1", score=i) for i in range(20)
        )

        assert len(top(board, 10)) == 10
        assert top(board, 1)[0].user_id == 19

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValueError, match="positive"):
            top([], 0)
