import os

wsgi_app = "habit_tracker.wsgi:app"
bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8080")
# One process shares the sqlite handle; requests run concurrently on threads.
workers = int(os.environ.get("GUNICORN_WORKERS", "1"))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
