"""Habits JSON listing tests (GET /api/habits)."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

from habit_tracker.domains.habits.services import create_habit, increment_streak


def test_list_habits_empty(client):
    resp = client.get("/api/habits")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "habits": []}


def test_list_habits_with_data(app, client):
    read = create_habit("Read")
    run = create_habit("Run")
    for _ in range(7):
        increment_streak(read.id)
    for _ in range(11):
        increment_streak(run.id)

    resp = client.get("/api/habits")
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["ok"] is True
    assert body["habits"] == [
        {"id": read.id, "name": "Read", "streak": 7, "progress": 70},
        {"id": run.id, "name": "Run", "streak": 11, "progress": 100},
    ]
