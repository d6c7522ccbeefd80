import os
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from alumni_events.core.config import load_config
from alumni_events.events.store import select_event_store
from alumni_events.observability.logger import init_sentry, log_error

router = APIRouter()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/healthz")
async def health_check() -> JSONResponse:
    """
    Health check endpoint with configuration and observability status.

    Returns:
        JSON response with status, configured store and timezone
    """
    cfg = load_config()
    response = {
        "status": "ok",
        "timestamp": _now_iso(),
        "event_store": cfg.event_store,
        "timezone": cfg.timezone,
        "timeline_scaling": cfg.timeline_scaling,
        "observability": {
            "enabled": cfg.obs_enabled,
            "sentry_configured": bool(os.getenv("SENTRY_DSN")),
        },
    }
    return JSONResponse(status_code=200, content=response)


@router.get("/healthz/ready")
async def readiness_check() -> JSONResponse:
    """
    Readiness check endpoint for container orchestration.

    The service is ready once the configured event store can be built.
    """
    checks = {"event_store": "ok"}
    try:
        select_event_store()
    except Exception as e:
        log_error(e, {"action": "readiness_check"})
        checks["event_store"] = "error"

    all_healthy = all(status == "ok" for status in checks.values())

    response = {
        "status": "ready" if all_healthy else "not_ready",
        "timestamp": _now_iso(),
        "checks": checks,
    }

    status_code = 200 if all_healthy else 503
    return JSONResponse(status_code=status_code, content=response)


@router.get("/healthz/live")
async def liveness_check() -> JSONResponse:
    """Liveness check endpoint."""
    return JSONResponse(status_code=200, content={"status": "alive", "timestamp": _now_iso()})


# Initialize Sentry on module import if enabled
init_sentry()
