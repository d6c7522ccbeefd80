from fastapi.testclient import TestClient

from alumni_events.main import app


client = TestClient(app)


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_healthz_reports_configuration(monkeypatch):
    monkeypatch.setenv("TIMELINE_SCALING", "truncated")
    r = client.get("/healthz")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["event_store"] == "mock"
    assert data["timeline_scaling"] == "truncated"
    assert data["observability"] == {"enabled": False, "sentry_configured": False}


def test_ready_and_live():
    assert client.get("/healthz/ready").json()["status"] == "ready"
    assert client.get("/healthz/live").json()["status"] == "alive"


def test_not_ready_with_unknown_store(monkeypatch):
    monkeypatch.setenv("EVENT_STORE", "sql")
    r = client.get("/healthz/ready")
    assert r.status_code == 503
    assert r.json()["checks"]["event_store"] == "error"
