"""CLI command for creating the habits schema.

Usage:
    flask --app habit_tracker.wsgi init-db
"""

from __future__ import annotations

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the habits table if it does not exist."""
    from habit_tracker import ensure_schema

    try:
        ensure_schema()
    except SQLAlchemyError as e:
        click.echo(f"  ✗ Failed to initialize database: {e}", err=True)
        raise SystemExit(1) from e
    click.echo("  ✓ Database schema is up to date")


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(init_db_command)
