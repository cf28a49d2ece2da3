"""Streak progress toward the fixed habit goal."""

from __future__ import annotations

STREAK_GOAL = 10


def progress(streak: int) -> int:
    """Return the streak as a percentage of the goal, capped at 100.

    Integer division truncates, so a streak of 3 is 30 and a streak of 15 is 100.
    """
    if streak > STREAK_GOAL:
        return 100
    return (streak * 100) // STREAK_GOAL
