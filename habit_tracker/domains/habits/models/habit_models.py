"""Habit model: one flat table, no relationships."""

from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column

from habit_tracker.extensions import db


class Habit(db.Model):
    __tablename__ = "habits"
    # AUTOINCREMENT keeps sqlite's id counter in sqlite_sequence, which the
    # bulk delete resets.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    streak: Mapped[int] = mapped_column(nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"<Habit id={self.id} name={self.name!r} streak={self.streak}>"
