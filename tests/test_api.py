"""Tests for the Flask API."""
import pytest

from api.app import SESSION_STORE, app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    SESSION_STORE.clear()
    with app.test_client() as client:
        yield client
    SESSION_STORE.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_health_counts_open_sessions(client):
    assert client.get("/health").get_json()["sessions"] == 0
    client.post("/api/sessions")
    client.post("/api/sessions")
    assert client.get("/health").get_json()["sessions"] == 2


def test_normalize(client):
    response = client.post("/api/normalize", json={"text": "Die Tuer ist zurueck"})
    assert response.status_code == 200
    assert response.get_json() == {"normalized": "Die Tür ist zurück"}


def test_compare(client):
    response = client.post(
        "/api/compare",
        json={"reference": "Der Hund läuft schnell", "user_input": "Der Hund rennt schnell"},
    )
    assert response.status_code == 200
    data = response.get_json()
    assert data["stats"] == {"correct": 14, "wrong": 5, "extra": 0, "missing": 0, "total": 19}
    assert data["word_stats"] == {"correct_words": 3, "wrong_words": 1, "total_words": 4}
    assert data["chars"][3] == {"char": " ", "status": "word-boundary"}
    assert "".join(c["char"] for c in data["chars"] if c["status"] == "wrong") == "rennt"


def test_compare_case_sensitive(client):
    response = client.post(
        "/api/compare",
        json={"reference": "Hallo", "user_input": "hallo", "ignore_case": False},
    )
    assert response.get_json()["stats"]["wrong"] == 5


def test_live(client):
    response = client.post("/api/live", json={"reference": "Hallo, Welt", "user_input": "Hallo We"})
    assert response.status_code == 200
    chars = response.get_json()["chars"]
    assert chars[5] == {"char": ",", "status": "punctuation"}
    assert [c["status"] for c in chars[-2:]] == ["missing", "missing"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"reference": "Hallo"},
        {"reference": "Hallo", "user_input": 5},
        {"reference": None, "user_input": "Hallo"},
    ],
)
def test_compare_rejects_bad_payload(client, payload):
    response = client.post("/api/compare", json=payload)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid request"


def test_compare_rejects_non_json_body(client):
    response = client.post("/api/compare", data="not json", content_type="text/plain")
    assert response.status_code == 400


def test_session_flow(client):
    response = client.post("/api/sessions")
    assert response.status_code == 201
    session_id = response.get_json()["session_id"]

    response = client.post(f"/api/sessions/{session_id}/keystroke")
    assert response.get_json() == {"has_started_typing": True}

    response = client.post(
        f"/api/sessions/{session_id}/results",
        json={"sentence_index": 0, "reference": "Guten Tag", "user_input": "Guten Tach"},
    )
    assert response.status_code == 201
    result = response.get_json()
    assert result["sentence_index"] == 0
    assert result["word_stats"] == {"correct_words": 1, "wrong_words": 1, "total_words": 2}
    assert result["elapsed_seconds"] >= 0

    response = client.get(f"/api/sessions/{session_id}")
    data = response.get_json()
    assert data["summary"]["sentence_count"] == 1
    assert data["summary"]["accuracy"] == 50
    assert len(data["results"]) == 1

    assert client.delete(f"/api/sessions/{session_id}").status_code == 200
    assert client.get(f"/api/sessions/{session_id}").status_code == 404


def test_session_result_validation(client):
    session_id = client.post("/api/sessions").get_json()["session_id"]
    response = client.post(
        f"/api/sessions/{session_id}/results",
        json={"sentence_index": -1, "reference": "Ja", "user_input": "Ja"},
    )
    assert response.status_code == 400
    assert SESSION_STORE[session_id].sentence_count == 0


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/sessions/missing"),
        ("delete", "/api/sessions/missing"),
        ("post", "/api/sessions/missing/keystroke"),
        ("post", "/api/sessions/missing/results"),
    ],
)
def test_unknown_session(client, method, path):
    response = getattr(client, method)(path)
    assert response.status_code == 404
    assert response.get_json() == {"error": "Session not found"}
