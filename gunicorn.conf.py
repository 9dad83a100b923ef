"""
Payboard - Gunicorn WSGI server configuration

    gunicorn payboard.wsgi:application -c gunicorn.conf.py

Liveness and readiness probes live at /health/live/ and /health/ready/.
"""

import logging
import multiprocessing
import os

IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"

logging.basicConfig(
    level=logging.INFO if IS_PRODUCTION else logging.DEBUG,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# =============================================================================
# SERVER BINDING
# =============================================================================

PORT = int(os.getenv("PORT", 8000))
bind = [f"0.0.0.0:{PORT}"]


# =============================================================================
# WORKERS
# =============================================================================

def calculate_workers():
    """Two workers per core plus one, capped so small hosts don't run out of memory."""
    return min((multiprocessing.cpu_count() * 2) + 1, 9)


workers = int(os.getenv("WEB_CONCURRENCY", calculate_workers()))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", 4))

# Restart workers periodically; jitter spreads the restarts out
max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 100))

timeout = 60
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))
keepalive = 5

limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190

preload_app = True
reload = os.getenv("GUNICORN_RELOAD", "false").lower() == "true"

forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "*")
if IS_PRODUCTION:
    secure_scheme_headers = {"X-FORWARDED-PROTO": "https"}


# =============================================================================
# LOGGING
# =============================================================================

accesslog = "-"
errorlog = "-"
loglevel = "info" if IS_PRODUCTION else "debug"
capture_output = True

access_log_format = (
    '%(h)s %(t)s "%(r)s" %(s)s %(b)s '
    'request_id=%({x-request-id}o)s response_time=%(D)s_us'
)

proc_name = "payboard"


# =============================================================================
# HOOKS
# =============================================================================

def when_ready(server):
    logger.info(f"Gunicorn ready at {server.address} with {workers} workers")


def post_fork(server, worker):
    """Open the database connection before the first request lands on this worker."""
    try:
        import django
        django.setup()
        from django.db import connection
        connection.ensure_connection()
        logger.info(f"Worker {worker.pid}: database connection ready")
    except Exception as e:
        logger.warning(f"Worker {worker.pid}: could not pre-open database connection: {e}")


def on_exit(server):
    logger.info("Gunicorn shutting down")
