"""Identity resolution tests (header and token transports)."""

from datetime import timedelta

import pytest

import config
from core.identity import create_access_token

PROTECTED_PATHS = [
    "/api/users",
    "/api/users/me",
    "/api/courses",
    "/api/study-materials",
    "/api/assignments",
    "/api/events",
    "/api/announcements",
    "/api/grievances",
    "/api/lost-found",
    "/api/lost-found/mine",
    "/api/research",
    "/api/research/applications/mine",
]


def test_missing_headers_is_unauthorized(client):
    response = client.get("/api/courses")
    assert response.status_code == 401
    assert response.json() == {"message": "No user info provided"}


def test_missing_role_header_is_unauthorized(client, student):
    response = client.get("/api/courses", headers={"x-user-id": student.user_id})
    assert response.status_code == 401


def test_unknown_user_is_unauthorized(client):
    response = client.get(
        "/api/events", headers={"x-user-id": "does-not-exist", "x-user-role": "student"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or inactive user"


@pytest.mark.parametrize("path", PROTECTED_PATHS)
def test_inactive_user_rejected_everywhere(client, make_user, headers, path):
    suspended = make_user("admin", status="suspended")
    response = client.get(path, headers=headers(suspended))
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or inactive user"


def test_claimed_role_must_match_stored_role(client, student):
    response = client.get(
        "/api/users", headers={"x-user-id": student.user_id, "x-user-role": "admin"}
    )
    assert response.status_code == 401


def test_me_returns_stored_identity(client, professor, headers):
    response = client.get("/api/users/me", headers=headers(professor))
    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == professor.user_id
    assert body["role"] == "professor"
    assert body["last_active"] is not None


def test_last_active_write_is_throttled(client, db_session, student, headers):
    client.get("/api/users/me", headers=headers(student))
    db_session.refresh(student)
    first = student.last_active
    assert first is not None

    client.get("/api/users/me", headers=headers(student))
    db_session.refresh(student)
    assert student.last_active == first


def test_stale_last_active_is_refreshed(client, db_session, student, headers):
    student.last_active = "2020-01-01T00:00:00+00:00"
    db_session.commit()
    body = client.get("/api/users/me", headers=headers(student)).json()
    assert body["last_active"] != "2020-01-01T00:00:00+00:00"


class TestTokenMode:
    @pytest.fixture(autouse=True)
    def token_mode(self, monkeypatch):
        monkeypatch.setattr(config, "IDENTITY_MODE", "token")

    def test_valid_token_resolves_user(self, client, student):
        token = create_access_token(student.user_id)
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["user_id"] == student.user_id

    def test_headers_are_ignored(self, client, student, headers):
        response = client.get("/api/users/me", headers=headers(student))
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/users/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid authentication credentials"

    def test_expired_token(self, client, student):
        token = create_access_token(student.user_id, expires_delta=timedelta(minutes=-1))
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_for_inactive_user(self, client, make_user):
        user = make_user("student", status="inactive")
        token = create_access_token(user.user_id)
        response = client.get("/api/courses", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or inactive user"


def test_admin_issues_token(client, admin, student, headers):
    response = client.post(f"/api/users/{student.user_id}/token", headers=headers(admin))
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"
    assert response.json()["access_token"]


def test_non_admin_cannot_issue_token(client, student, headers):
    response = client.post(f"/api/users/{student.user_id}/token", headers=headers(student))
    assert response.status_code == 403
