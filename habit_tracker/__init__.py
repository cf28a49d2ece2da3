"""Habit tracker application factory and bootstrap."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

from flask import Flask, request
from sqlalchemy.exc import SQLAlchemyError

from habit_tracker.config import config_by_name
from habit_tracker.extensions import db, init_extensions


def ensure_schema() -> None:
    """Create the habits table if it is missing; existing data is left alone."""
    # Import models so metadata is registered before create_all.
    from habit_tracker.domains.habits.models import habit_models  # noqa: F401

    db.create_all()


def create_app(
    config_name: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Flask:
    """Create and configure the habit tracker Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
        static_folder=str(Path(__file__).parent / "static"),
        template_folder=str(Path(__file__).parent / "templates"),
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    if overrides:
        app.config.update(overrides)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    if db_uri and db_uri.startswith("sqlite:///"):
        db_path = db_uri.replace("sqlite:///", "", 1)
        abs_path = project_root / db_path
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{abs_path}"
    elif db_uri and not db_uri.startswith("sqlite:"):
        # Drop sqlite-specific connect_args that break other drivers
        engine_opts = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS") or {})
        connect_args = dict(engine_opts.get("connect_args") or {})
        connect_args.pop("timeout", None)
        if connect_args:
            engine_opts["connect_args"] = connect_args
        else:
            engine_opts.pop("connect_args", None)
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = engine_opts

    init_extensions(app)

    if app.config.get("AUTO_CREATE_SCHEMA", True):
        with app.app_context():
            try:
                ensure_schema()
            except SQLAlchemyError as exc:
                app.logger.critical("Failed to initialize database: %s", exc)
                raise SystemExit(1) from exc
        app.logger.info("Database connection initialized successfully")

    _register_blueprints(app)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    @app.after_request
    def _static_cache_headers(resp):
        if request.path.startswith("/static/") and resp.status_code == 200:
            max_age = int(app.config.get("STATIC_CACHE_MAX_AGE") or 3600)
            resp.headers["Cache-Control"] = f"public, max-age={max_age}"
        return resp

    from habit_tracker.scripts.init_db import register_commands

    register_commands(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from habit_tracker.domains.habits.controllers.habit_api import habit_api_bp
    from habit_tracker.domains.habits.controllers.habit_pages import habit_pages_bp

    app.register_blueprint(habit_pages_bp)
    app.register_blueprint(habit_api_bp, url_prefix="/api/habits")


def _register_error_handlers(app: Flask) -> None:
    """Basic JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
