"""User resource tests."""


def test_admin_creates_user(client, admin, headers):
    response = client.post(
        "/api/users",
        json={"name": "New Student", "email": "new@campus.edu", "role": "student"},
        headers=headers(admin),
    )
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "new@campus.edu"
    assert body["status"] == "active"
    assert body["user_id"]


def test_duplicate_email_conflicts(client, admin, student, headers):
    response = client.post(
        "/api/users",
        json={"name": "Dup", "email": student.email, "role": "student"},
        headers=headers(admin),
    )
    assert response.status_code == 409


def test_only_admin_creates_users(client, professor, headers):
    response = client.post(
        "/api/users",
        json={"name": "X", "email": "x@campus.edu", "role": "student"},
        headers=headers(professor),
    )
    assert response.status_code == 403


def test_invalid_email_is_validation_error(client, admin, headers):
    response = client.post(
        "/api/users",
        json={"name": "X", "email": "not-an-email", "role": "student"},
        headers=headers(admin),
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("email:")


def test_non_admin_lists_only_self(client, student, make_user, headers):
    make_user("student")
    response = client.get("/api/users", headers=headers(student))
    assert response.status_code == 200
    assert [u["user_id"] for u in response.json()] == [student.user_id]


def test_admin_lists_everyone(client, admin, student, professor, headers):
    response = client.get("/api/users", headers=headers(admin))
    ids = {u["user_id"] for u in response.json()}
    assert {admin.user_id, student.user_id, professor.user_id} <= ids


def test_cannot_read_other_user(client, student, professor, headers):
    response = client.get(f"/api/users/{professor.user_id}", headers=headers(student))
    assert response.status_code == 403


def test_unknown_user_is_not_found(client, admin, headers):
    response = client.get("/api/users/nope", headers=headers(admin))
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_user_updates_own_profile(client, student, headers):
    response = client.put(
        f"/api/users/{student.user_id}",
        json={"phone": "555-0100", "department": "Physics"},
        headers=headers(student),
    )
    assert response.status_code == 200
    assert response.json()["phone"] == "555-0100"
    assert response.json()["role"] == "student"


def test_user_cannot_promote_self(client, student, headers):
    response = client.put(
        f"/api/users/{student.user_id}", json={"role": "admin"}, headers=headers(student)
    )
    assert response.status_code == 403


def test_admin_deactivates_user(client, admin, student, headers):
    response = client.put(
        f"/api/users/{student.user_id}", json={"status": "inactive"}, headers=headers(admin)
    )
    assert response.status_code == 200
    assert client.get("/api/courses", headers=headers(student)).status_code == 401


def test_only_admin_deletes_users(client, admin, student, headers):
    assert client.delete(
        f"/api/users/{student.user_id}", headers=headers(student)
    ).status_code == 403
    response = client.delete(f"/api/users/{student.user_id}", headers=headers(admin))
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_user_owning_records_cannot_be_deleted(client, admin, professor, headers):
    client.post("/api/courses", json={"code": "EE1", "name": "Circuits"}, headers=headers(professor))
    response = client.delete(f"/api/users/{professor.user_id}", headers=headers(admin))
    assert response.status_code == 409
    assert client.get("/api/users/me", headers=headers(professor)).status_code == 200
