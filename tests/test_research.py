"""Research internship and application tests."""

import pytest


@pytest.fixture
def internship(client, professor, headers):
    response = client.post(
        "/api/research",
        json={
            "title": "Graph ML",
            "description": "Summer research on graph neural networks",
            "duration": "10 weeks",
            "required_skills": ["python", "pytorch"],
            "deadline": "2030-04-01",
        },
        headers=headers(professor),
    )
    assert response.status_code == 201
    return response.json()


def apply(client, internship, user, headers):
    return client.post(f"/api/research/{internship['internship_id']}/apply", headers=headers(user))


def test_apply_once(client, internship, student, headers):
    response = apply(client, internship, student, headers)
    assert response.status_code == 201
    assert response.json()["applicant_count"] == 1
    assert response.json()["applicants"][0]["status"] == "pending"

    again = apply(client, internship, student, headers)
    assert again.status_code == 409


def test_only_students_apply(client, internship, club, headers):
    assert apply(client, internship, club, headers).status_code == 403


def test_professors_see_only_their_own_posts(client, internship, professor, make_user, headers):
    other = make_user("professor")
    assert client.get("/api/research", headers=headers(other)).json() == []
    response = client.get(f"/api/research/{internship['internship_id']}", headers=headers(other))
    assert response.status_code == 403
    assert len(client.get("/api/research", headers=headers(professor)).json()) == 1


def test_applicant_privacy(client, internship, professor, student, make_user, headers):
    classmate = make_user("student")
    apply(client, internship, student, headers)
    apply(client, internship, classmate, headers)
    path = f"/api/research/{internship['internship_id']}"

    student_view = client.get(path, headers=headers(student)).json()
    assert student_view["applicant_count"] == 2
    assert [a["student"]["user_id"] for a in student_view["applicants"]] == [student.user_id]

    assert len(client.get(f"{path}/applicants", headers=headers(professor)).json()) == 2
    assert client.get(f"{path}/applicants", headers=headers(student)).status_code == 403


def test_withdraw_while_pending(client, internship, student, headers):
    apply(client, internship, student, headers)
    path = f"/api/research/{internship['internship_id']}/apply"
    response = client.delete(path, headers=headers(student))
    assert response.status_code == 200
    assert response.json()["success"] is True

    again = client.delete(path, headers=headers(student))
    assert again.status_code == 404


def test_cannot_withdraw_after_decision(client, internship, professor, student, headers):
    application = apply(client, internship, student, headers).json()["applicants"][0]
    base = f"/api/research/{internship['internship_id']}"

    decision = client.patch(
        f"{base}/applicants/{application['application_id']}",
        json={"status": "accepted"},
        headers=headers(professor),
    )
    assert decision.status_code == 200
    assert decision.json()["status"] == "accepted"

    response = client.delete(f"{base}/apply", headers=headers(student))
    assert response.status_code == 400
    assert response.json() == {"message": "Cannot withdraw a non-pending application"}


def test_decision_status_is_validated(client, internship, professor, student, headers):
    application = apply(client, internship, student, headers).json()["applicants"][0]
    response = client.patch(
        f"/api/research/{internship['internship_id']}/applicants/{application['application_id']}",
        json={"status": "maybe"},
        headers=headers(professor),
    )
    assert response.status_code == 400


def test_my_applications(client, internship, student, headers):
    apply(client, internship, student, headers)
    response = client.get("/api/research/applications/mine", headers=headers(student))
    assert response.status_code == 200
    mine = response.json()
    assert [m["internship_id"] for m in mine] == [internship["internship_id"]]
    assert mine[0]["application"]["status"] == "pending"
    assert mine[0]["professor"]["email"]
