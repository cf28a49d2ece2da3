"""add habits table

Revision ID: 20261019_habits_initial
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_habits_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "habits",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("streak", sa.Integer(), nullable=False, server_default="0"),
        sqlite_autoincrement=True,
    )


def downgrade():
    op.drop_table("habits")
