"""Progress percentage toward the streak goal."""

import pytest

pytestmark = pytest.mark.unit

from habit_tracker.domains.habits.progress import STREAK_GOAL, progress


@pytest.mark.parametrize(
    "streak, expected",
    [(0, 0), (1, 10), (3, 30), (5, 50), (7, 70), (9, 90), (10, 100), (11, 100), (15, 100)],
)
def test_progress_values(streak, expected):
    assert progress(streak) == expected


def test_progress_truncates_within_goal():
    for streak in range(STREAK_GOAL + 1):
        assert progress(streak) == (streak * 100) // STREAK_GOAL


def test_progress_is_capped_above_goal():
    assert progress(STREAK_GOAL + 1) == 100
    assert progress(1000) == 100


def test_progress_is_deterministic():
    assert progress(4) == progress(4) == 40
