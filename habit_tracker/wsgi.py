"""WSGI entrypoint for the habit tracker."""

from __future__ import annotations

from habit_tracker import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"])  # nosec B104
