"""Health check endpoints for deployment probes."""

import os
import time
from typing import Any, Dict

from django.core.cache import cache
from django.db import connection
from django.db.utils import OperationalError
from django.http import JsonResponse
from django.utils import timezone

APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
APP_START_TIME = time.time()


def _check_database() -> Dict[str, Any]:
    start = time.time()
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return {"status": "ok", "latency_ms": round((time.time() - start) * 1000, 2)}
    except OperationalError as e:
        return {"status": "error", "error": str(e)}


def _check_cache() -> Dict[str, Any]:
    try:
        cache.set("health:probe", "ok", 10)
        if cache.get("health:probe") != "ok":
            return {"status": "error", "error": "cache read-back mismatch"}
        return {"status": "ok"}
    except Exception as e:
        return {"status": "error", "error": str(e)}


def liveness_check(request):
    """Process is up; no dependencies touched."""
    return JsonResponse({
        "status": "alive",
        "version": APP_VERSION,
        "uptime_seconds": int(time.time() - APP_START_TIME),
        "timestamp": timezone.now().isoformat(),
    })


def readiness_check(request):
    checks = {
        "database": _check_database(),
        "cache": _check_cache(),
    }
    ready = all(check["status"] == "ok" for check in checks.values())
    return JsonResponse({
        "status": "ready" if ready else "not_ready",
        "checks": checks,
        "timestamp": timezone.now().isoformat(),
    }, status=200 if ready else 503)
