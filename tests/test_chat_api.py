import pytest
from fastapi.testclient import TestClient

from campus_faq.api.dependencies import get_engine
from campus_faq.config import Config
from main import app


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_chat_returns_new_session_id(client):
    res = client.post("/api/chat", json={"message": "hello"})

    assert res.status_code == 200
    data = res.json()
    assert data["source"] == "conversational"
    assert data["confidence"] == 0.95
    assert len(data["session_id"]) == 16
    assert "relatedFAQs" in data


def test_chat_keeps_given_session(client, engine):
    res = client.post("/api/chat", json={"message": "zzxxqqpp", "session_id": "abc"})

    assert res.json()["session_id"] == "abc"
    assert engine.sessions.peek("guest:abc").context.messages() == ["zzxxqqpp"]


def test_chat_requires_message(client):
    res = client.post("/api/chat", json={"message": "   "})
    assert res.status_code == 400


def test_reasoning_hidden_unless_debug(client, monkeypatch):
    monkeypatch.setattr(Config, "DEBUG_REASONING", False)
    res = client.post("/api/chat", json={"message": "zzxxqqpp"})
    assert res.json()["reasoning"] is None


def test_suggestions(client, index):
    res = client.get("/api/suggestions")
    assert res.json()["suggestions"] == [faq.question for faq in index.get_popular()]


def test_faq_stats(client, index):
    data = client.get("/api/faq/stats").json()
    assert data["total"] == index.total_count()
    assert {"category": "Admissions", "count": 2} in data["categories"]


def test_health(client):
    data = client.get("/api/health").json()
    assert data["status"] == "ok"
    assert data["faq_ready"] is True


def test_engine_not_initialized():
    app.dependency_overrides.clear()
    res = TestClient(app).get("/api/health")
    assert res.status_code == 503


def test_rotation_reset_disabled_without_token(client, monkeypatch):
    monkeypatch.setattr(Config, "ADMIN_TOKEN", "")
    res = client.post("/api/admin/rotation/reset", headers={"X-Admin-Token": "anything"})
    assert res.status_code == 403


def test_rotation_reset_rejects_wrong_token(client, monkeypatch):
    monkeypatch.setattr(Config, "ADMIN_TOKEN", "secret")
    res = client.post("/api/admin/rotation/reset", headers={"X-Admin-Token": "wrong"})
    assert res.status_code == 403


def test_rotation_reset_for_one_session(client, engine, monkeypatch):
    monkeypatch.setattr(Config, "ADMIN_TOKEN", "secret")
    client.post("/api/chat", json={"message": "zzxxqqpp", "session_id": "abc"})

    res = client.post(
        "/api/admin/rotation/reset",
        json={"session_id": "abc"},
        headers={"X-Admin-Token": "secret"},
    )

    assert res.status_code == 200
    assert res.json() == {"success": True, "sessions_reset": 1}
    assert engine.sessions.peek("guest:abc").rotator.offset_for("general") == 0


def test_rotation_reset_all_sessions(client, monkeypatch):
    monkeypatch.setattr(Config, "ADMIN_TOKEN", "secret")
    client.post("/api/chat", json={"message": "hello", "session_id": "one"})
    client.post("/api/chat", json={"message": "hello", "session_id": "two"})

    res = client.post("/api/admin/rotation/reset", headers={"X-Admin-Token": "secret"})
    assert res.json()["sessions_reset"] == 2
