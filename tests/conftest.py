import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep engine configuration at its defaults unless a test sets it."""
    for name in ("API_KEY", "EVENT_STORE", "EVENT_DATA_PATH", "TIMELINE_SCALING", "TIMEZONE", "OBS_ENABLED", "SENTRY_DSN"):
        monkeypatch.delenv(name, raising=False)
