from habit_tracker.domains.habits.models.habit_models import Habit

__all__ = ["Habit"]
