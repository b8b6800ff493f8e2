# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick checkup for the Plant Care Tracker: is the server up, can it reach the plant database,
# and is the machine running out of memory or disk.
# 🧪 Purpose (Technical Summary):
# /health (static OK), /health/detailed (database probe, pool status, psutil process and host
# metrics; 503 when the database is down, "degraded" under resource pressure), /health/live and
# /health/ready for orchestrators.
# 🔗 Dependencies:
# FastAPI, psutil, app.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
import platform
import time
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check, db_manager
from app.shared.utils.logging import SERVICE_NAME

logger = logging.getLogger(__name__)

health_router = APIRouter()

MEMORY_PRESSURE_PERCENT = 90
DISK_PRESSURE_PERCENT = 95

_started_monotonic = time.monotonic()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _uptime_seconds() -> float:
    return round(time.monotonic() - _started_monotonic, 3)


def _system_metrics() -> Dict[str, Any]:
    try:
        memory = psutil.virtual_memory()
        disk = psutil.disk_usage('/')
        process = psutil.Process()
        return {
            "status": "healthy",
            "platform": platform.platform(),
            "cpu_count": psutil.cpu_count(),
            "cpu_percent": psutil.cpu_percent(interval=None),
            "memory_percent": memory.percent,
            "disk_percent": round(disk.used / disk.total * 100, 2),
            "process_memory_bytes": process.memory_info().rss,
            "process_threads": process.num_threads(),
        }
    except (psutil.Error, OSError) as e:
        logger.warning(f"System metrics unavailable: {e}")
        return {"status": "error", "error": str(e)}


def _under_pressure(metrics: Dict[str, Any]) -> bool:
    return metrics["status"] == "healthy" and (
        metrics["memory_percent"] > MEMORY_PRESSURE_PERCENT
        or metrics["disk_percent"] > DISK_PRESSURE_PERCENT
    )


@health_router.get("/health", summary="Basic Health Check", tags=["Health Check"])
async def health_check() -> JSONResponse:
    """Static OK for load balancers; touches nothing."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": _now_iso(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
        },
    )


@health_router.get("/health/detailed", summary="Detailed Health Check", tags=["Health Check"])
async def detailed_health_check() -> JSONResponse:
    started = time.perf_counter()
    settings = get_settings()

    database = await database_health_check()
    database["connection"] = db_manager.get_connection_info()
    system = _system_metrics()

    if database["status"] != "healthy":
        overall = "unhealthy"
        logger.warning(f"Detailed health check: database unhealthy ({database.get('error')})")
    elif _under_pressure(system):
        overall = "degraded"
    else:
        overall = "healthy"

    return JSONResponse(
        status_code=503 if overall == "unhealthy" else 200,
        content={
            "status": overall,
            "timestamp": _now_iso(),
            "service": SERVICE_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": _uptime_seconds(),
            "response_time_seconds": round(time.perf_counter() - started, 4),
            "components": {"database": database, "system": system},
        },
    )


@health_router.get("/health/live", summary="Liveness Probe", tags=["Health Check"])
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready", summary="Readiness Probe", tags=["Health Check"])
async def readiness_probe() -> JSONResponse:
    """Ready once the database answers."""
    database = await database_health_check()
    if database["status"] == "healthy":
        return JSONResponse(status_code=200, content={"status": "ready", "timestamp": _now_iso()})

    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "database_unhealthy", "timestamp": _now_iso()},
    )
