"""Application services."""

from .leaderboard import show_leaderboard, tour_leaderboard

__all__ = ["show_leaderboard", "tour_leaderboard"]
