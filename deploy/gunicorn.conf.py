"""
Gunicorn configuration for MoodJournal.
Every setting can be overridden from the environment for container deployment.
"""

from __future__ import annotations

import logging
import multiprocessing
import os

bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8000")

# gthread workers; AI calls block on the network for up to AI_TIMEOUT_SECONDS
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
workers = int(os.environ.get("GUNICORN_WORKERS", str(multiprocessing.cpu_count() + 1)))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
max_requests = int(os.environ.get("GUNICORN_MAX_REQUESTS", "5000"))
max_requests_jitter = int(os.environ.get("GUNICORN_MAX_REQUESTS_JITTER", "500"))

# Must exceed AI_TIMEOUT_SECONDS so entry saves with insights finish
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "45"))
graceful_timeout = int(os.environ.get("GUNICORN_GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.environ.get("GUNICORN_KEEPALIVE", "5"))

accesslog = os.environ.get("GUNICORN_ACCESSLOG", "-")
errorlog = os.environ.get("GUNICORN_ERRORLOG", "-")
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
capture_output = True
access_log_format = os.environ.get(
    "GUNICORN_ACCESS_LOG_FORMAT",
    '{"timestamp": "%(t)s", "remote": "%(h)s", "request": "%(r)s", '
    '"status": %(s)s, "bytes": %(b)s, "response_time": %(D)s}',
)

preload_app = os.environ.get("GUNICORN_PRELOAD", "false").lower() in ("1", "true", "yes")
forwarded_allow_ips = os.environ.get("GUNICORN_FORWARDED_ALLOW_IPS", "127.0.0.1")

statsd_host = os.environ.get("STATSD_HOST")
if statsd_host:
    statsd_prefix = os.environ.get("STATSD_PREFIX", "moodjournal")

proc_name = os.environ.get("GUNICORN_PROC_NAME", "moodjournal")

wsgi_app = "moodjournal.wsgi:app"


def when_ready(server):
    logging.getLogger(__name__).info(
        "MoodJournal ready on %s (workers=%s, threads=%s)", bind, workers, threads
    )


def worker_abort(worker):
    logging.getLogger(__name__).warning(
        "Worker %s exceeded %ss, aborting", worker.pid, timeout
    )
