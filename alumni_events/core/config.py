import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel


DEFAULT_EVENT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "sample_events.json"


class AppConfig(BaseModel):
    timezone: str = "Asia/Ho_Chi_Minh"
    api_key: Optional[str] = None
    event_store: str = "mock"
    event_data_path: Path = DEFAULT_EVENT_DATA_PATH
    timeline_scaling: Literal["fractional", "truncated"] = "fractional"
    obs_enabled: bool = False
    sentry_dsn: Optional[str] = None
    environment: str = "development"


def _timeline_scaling() -> str:
    mode = os.getenv("TIMELINE_SCALING", "fractional").strip().lower()
    if mode not in ("fractional", "truncated"):
        return "fractional"
    return mode


def load_config() -> AppConfig:
    data_path = os.getenv("EVENT_DATA_PATH")
    return AppConfig(
        timezone=os.getenv("TIMEZONE", "Asia/Ho_Chi_Minh"),
        api_key=os.getenv("API_KEY") or None,
        event_store=os.getenv("EVENT_STORE", "mock").lower(),
        event_data_path=Path(data_path) if data_path else DEFAULT_EVENT_DATA_PATH,
        timeline_scaling=_timeline_scaling(),
        obs_enabled=os.getenv("OBS_ENABLED", "false").lower() == "true",
        sentry_dsn=os.getenv("SENTRY_DSN"),
        environment=os.getenv("ENVIRONMENT", "development"),
    )
