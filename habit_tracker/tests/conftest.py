import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from habit_tracker import create_app
from habit_tracker.extensions import db


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def db_uri(tmp_path):
    return f"sqlite:///{tmp_path / 'habits.db'}"


@pytest.fixture()
def app(db_uri):
    """
    Create a per-test app backed by its own sqlite file.

    A fresh file per test keeps sqlite's id counter isolated, so numbering
    assertions start from 1 in every test.
    """
    app = create_app("testing", {"SQLALCHEMY_DATABASE_URI": db_uri})
    ctx = app.app_context()
    ctx.push()
    try:
        yield app
    finally:
        db.session.remove()
        db.engine.dispose()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()
