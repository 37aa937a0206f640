import time

import pytest

from factorcap import server
from factorcap.cap import Ticket
from factorcap.generator import Mode
from factorcap.work import generate_challenge


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(server, "ACTIVE_CHALLENGES", {})
    server.app.config["TESTING"] = True
    with server.app.test_client() as client:
        yield client


def test_challenge_then_verify(client, monkeypatch):
    captured = {}

    def fake_generate(mode, size, max_length=None):
        token, answer = generate_challenge(mode, 2)
        captured["answer"] = answer
        return token, answer

    monkeypatch.setattr("factorcap.cap.generate_challenge", fake_generate)
    resp = client.get("/api/challenge")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["algo"] == "prime-factors"
    assert body["mode"] == server.SETTINGS.mode.value
    assert body["challenge_id"] in server.ACTIVE_CHALLENGES

    resp = client.post("/api/verify", json={
        "challenge_id": body["challenge_id"],
        "factors": captured["answer"],
    })
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}
    assert body["challenge_id"] not in server.ACTIVE_CHALLENGES


def test_verify_wrong_answer_consumes_challenge(client):
    body = client.get("/api/challenge").get_json()
    resp = client.post("/api/verify", json={
        "challenge_id": body["challenge_id"], "factors": "2x1",
    })
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Incorrect factors"

    resp = client.post("/api/verify", json={
        "challenge_id": body["challenge_id"], "factors": "2x1",
    })
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid or expired challenge."


def test_verify_missing_fields(client):
    resp = client.post("/api/verify", json={})
    assert resp.status_code == 400
    body = client.get("/api/challenge").get_json()
    resp = client.post("/api/verify", json={"challenge_id": body["challenge_id"]})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Missing factors."


def test_malformed_factors(client):
    body = client.get("/api/challenge").get_json()
    resp = client.post("/api/verify", json={
        "challenge_id": body["challenge_id"], "factors": "abc",
    })
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Malformed factor list"


def test_health(client):
    assert client.get("/api/health").get_json()["ok"] is True


def test_expired_tickets_are_dropped(client):
    stale = Ticket(challenge_id="stale", token="B", mode=Mode.QUADS, size=1,
                   answer_hash="", expires_at=time.time() - 1)
    server.ACTIVE_CHALLENGES["stale"] = stale
    body = client.get("/api/challenge").get_json()
    assert "stale" not in server.ACTIVE_CHALLENGES
    assert body["challenge_id"] in server.ACTIVE_CHALLENGES
