import json
import logging
from unittest.mock import patch

from alumni_events.observability.logger import init_sentry, log_event, timing


def test_timing_measures_duration():
    with timing("op") as timer:
        sum(range(1000))
    assert timer.get_duration_ms() is not None
    assert timer.get_duration_ms() >= 0


def test_log_event_emits_json(caplog):
    caplog.set_level(logging.INFO, logger="alumni_events.observability.logger")
    log_event(action="ranked", operation="get_events_by_popularity", duration_ms=1.234, top=5)
    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["action"] == "ranked"
    assert entry["operation"] == "get_events_by_popularity"
    assert entry["duration_ms"] == 1.23
    assert entry["top"] == 5
    assert entry["timestamp"].endswith("Z")


def test_init_sentry_disabled_by_default():
    assert init_sentry() is False


def test_init_sentry_requires_dsn(monkeypatch):
    monkeypatch.setenv("OBS_ENABLED", "true")
    assert init_sentry() is False


def test_init_sentry_without_sdk(monkeypatch):
    monkeypatch.setenv("OBS_ENABLED", "true")
    monkeypatch.setenv("SENTRY_DSN", "https://key@example.invalid/1")
    with patch("alumni_events.observability.logger.sentry_sdk", None):
        assert init_sentry() is False


def test_log_lines_stay_valid_json_for_non_finite_values(caplog):
    caplog.set_level(logging.INFO, logger="alumni_events.observability.logger")
    log_event(action="generated", operation="get_suggested_timeline", duration_hours=float("inf"))
    message = caplog.records[-1].getMessage()
    assert "Infinity" not in message
    assert json.loads(message)["duration_hours"] == "inf"
