"""Error envelope tests."""

from fastapi.testclient import TestClient

from app import app
from core.dependencies import get_event_manager


class ExplodingManager:
    def list(self, actor, **filters):
        raise RuntimeError("disk on fire")


def test_not_found_envelope(client, student, headers):
    response = client.get("/api/events/missing", headers=headers(student))
    assert response.status_code == 404
    assert response.json() == {"message": "Event not found"}


def test_validation_envelope(client, club, headers):
    response = client.post("/api/events", json={"description": "no title"}, headers=headers(club))
    assert response.status_code == 400
    assert response.json() == {"message": "title: Field required"}


def test_malformed_json(client, club, headers):
    response = client.post(
        "/api/events",
        content=b"{not json",
        headers={**headers(club), "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "message" in response.json()


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_internal_error_is_opaque(client, student, headers):
    app.dependency_overrides[get_event_manager] = lambda: ExplodingManager()
    unsafe_client = TestClient(app, raise_server_exceptions=False)
    response = unsafe_client.get("/api/events", headers=headers(student))
    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
