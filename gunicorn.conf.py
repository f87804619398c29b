"""Gunicorn config for container deployment."""
import os

# Bind to the platform's PORT or default 8080
bind = f"0.0.0.0:{os.environ.get('PORT', '8080')}"

# Uvicorn async workers, each loads its own copy of the dataset at startup.
# Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Import path of the ASGI app: gunicorn -c gunicorn.conf.py
wsgi_app = "sales_api.main:app"

timeout = 30

# Graceful timeout for shutdown
graceful_timeout = 30

# Keep-alive must exceed the upstream proxy keep-alive (commonly 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("SALES_LOG_LEVEL", "info").lower()
