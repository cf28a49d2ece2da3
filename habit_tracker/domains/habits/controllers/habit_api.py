"""Read-only habits JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify

from habit_tracker.domains.habits import services as habit_services
from habit_tracker.domains.habits.progress import progress
from habit_tracker.domains.habits.schemas.habit_schemas import (
    HabitListResponse,
    HabitResponse,
)

habit_api_bp = Blueprint("habit_api", __name__)


@habit_api_bp.get("")
def list_habits():
    payload = HabitListResponse(
        habits=[
            HabitResponse(
                id=habit.id,
                name=habit.name,
                streak=habit.streak,
                progress=progress(habit.streak),
            )
            for habit in habit_services.list_habits()
        ]
    )
    return jsonify(payload.model_dump())
