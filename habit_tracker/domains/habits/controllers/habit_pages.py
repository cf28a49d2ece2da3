"""Habit HTML pages and form actions."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from habit_tracker.domains.habits import services as habit_services
from habit_tracker.domains.habits.progress import progress
from habit_tracker.domains.habits.schemas.habit_schemas import HabitCreate

logger = logging.getLogger(__name__)

habit_pages_bp = Blueprint("habit_pages", __name__)


@habit_pages_bp.get("/")
def list_habits():
    habits = habit_services.list_habits()
    return render_template("habits/index.html", habits=habits, progress=progress)


@habit_pages_bp.post("/add")
def add_habit():
    data = HabitCreate.model_validate(request.form.to_dict())
    habit_services.create_habit(data.name)
    return redirect(url_for("habit_pages.list_habits"))


@habit_pages_bp.get("/mark_done/<int:habit_id>")
def mark_done(habit_id: int):
    habit = habit_services.increment_streak(habit_id)
    if not habit:
        return jsonify({"ok": False, "error": "Habit not found"}), 404
    return redirect(url_for("habit_pages.list_habits"))


@habit_pages_bp.post("/delete_all")
def delete_all():
    try:
        habit_services.delete_all_habits()
    except SQLAlchemyError:
        logger.exception("Failed to delete habits")
        return jsonify({"ok": False, "error": "Failed to delete habits"}), 500
    return redirect(url_for("habit_pages.list_habits"))
