import logging
from fastapi import FastAPI

from alumni_events.core.config import load_config
from alumni_events.observability.logger import log_info
from alumni_events.routes.events import router as events_router
from alumni_events.routes.health import router as health_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Alumni Events Scheduling and Recommendation")


@app.on_event("startup")
def _startup():
    cfg = load_config()
    log_info("Scheduling engine started", {
        "event_store": cfg.event_store,
        "timezone": cfg.timezone,
        "timeline_scaling": cfg.timeline_scaling,
    })


# Routes
app.include_router(events_router, prefix="/events", tags=["events"])
app.include_router(health_router, tags=["health"])


@app.get("/")
def health():
    return {"status": "ok"}
