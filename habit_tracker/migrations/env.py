"""Alembic environment for the habit tracker."""

from __future__ import annotations

from logging.config import fileConfig

from alembic import context
from flask import current_app, has_app_context
from sqlalchemy import engine_from_config, pool

from habit_tracker.domains.habits.models import habit_models  # noqa: F401
from habit_tracker.extensions import db

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name and config.file_config.has_section("formatters"):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = db.metadata


def get_url() -> str:
    # `flask db ...` runs inside the app context; bare `alembic` builds an app.
    if has_app_context():
        return current_app.config["SQLALCHEMY_DATABASE_URI"]
    from habit_tracker import create_app

    app = create_app(
        config.get_main_option("habit_tracker_env", "development"),
        {"AUTO_CREATE_SCHEMA": False},
    )
    return app.config["SQLALCHEMY_DATABASE_URI"]


def run_migrations_offline() -> None:
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_url()

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
