"""Habit services: list, create, streak increments and the bulk reset."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, text, update
from sqlalchemy.exc import SQLAlchemyError

from habit_tracker.domains.habits.models.habit_models import Habit
from habit_tracker.extensions import db

logger = logging.getLogger(__name__)


def list_habits() -> List[Habit]:
    return Habit.query.order_by(Habit.id.asc()).all()


def get_habit(habit_id: int) -> Optional[Habit]:
    return db.session.get(Habit, habit_id)


def create_habit(name: str | None) -> Optional[Habit]:
    """Insert a habit with a zero streak. Blank names are skipped and return None."""
    name_norm = (name or "").strip()
    if not name_norm:
        logger.debug("Skipping habit creation for blank name")
        return None

    habit = Habit(name=name_norm, streak=0)
    db.session.add(habit)
    db.session.commit()
    logger.info("Created habit %s (%r)", habit.id, habit.name)
    return habit


def save_habit(habit: Habit) -> Habit:
    db.session.add(habit)
    db.session.commit()
    return habit


def increment_streak(habit_id: int) -> Optional[Habit]:
    """Add one to the habit's streak in a single UPDATE statement.

    Returns the refreshed habit, or None when no habit has that id.
    """
    result = db.session.execute(
        update(Habit).where(Habit.id == habit_id).values(streak=Habit.streak + 1)
    )
    if result.rowcount == 0:
        db.session.rollback()
        logger.warning("Habit %s not found; streak unchanged", habit_id)
        return None
    db.session.commit()
    habit = db.session.get(Habit, habit_id, populate_existing=True)
    logger.info("Habit %s streak is now %s", habit_id, habit.streak)
    return habit


def _reset_id_counter() -> None:
    dialect = db.engine.dialect.name
    if dialect == "sqlite":
        db.session.execute(
            text("DELETE FROM sqlite_sequence WHERE name = :table"),
            {"table": Habit.__tablename__},
        )
    elif dialect == "postgresql":
        db.session.execute(
            text("SELECT setval(pg_get_serial_sequence(:table, 'id'), 1, false)"),
            {"table": Habit.__tablename__},
        )


def delete_all_habits() -> int:
    """Remove every habit and restart id numbering, committed as one transaction.

    Raises SQLAlchemyError after rolling back if either statement fails.
    """
    try:
        result = db.session.execute(delete(Habit))
        _reset_id_counter()
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    logger.info("Deleted %s habits and reset the id counter", result.rowcount)
    return result.rowcount
