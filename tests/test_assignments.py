"""Assignment submission and grading tests."""

import pytest


@pytest.fixture
def course_id(client, professor, student, headers):
    response = client.post(
        "/api/courses",
        json={"code": "MA201", "name": "Linear Algebra", "student_ids": [student.user_id]},
        headers=headers(professor),
    )
    return response.json()["course_id"]


@pytest.fixture
def assignment(client, professor, course_id, headers):
    response = client.post(
        "/api/assignments",
        json={
            "title": "Problem Set 1",
            "course_id": course_id,
            "due_date": "2030-01-15T23:59:00Z",
            "total_marks": 100,
        },
        headers=headers(professor),
    )
    assert response.status_code == 201
    return response.json()


def test_professor_student_round_trip(client, professor, student, assignment, headers):
    assignment_id = assignment["assignment_id"]

    listed = client.get("/api/assignments", headers=headers(student)).json()
    assert [a["assignment_id"] for a in listed] == [assignment_id]

    response = client.post(
        f"/api/assignments/{assignment_id}/submit",
        json={"file_url": "/uploads/ps1.pdf"},
        headers=headers(student),
    )
    assert response.status_code == 200
    assert response.json()["submission_count"] == 1

    response = client.patch(
        f"/api/assignments/{assignment_id}/submissions/{student.user_id}",
        json={"marks": 92, "feedback": "Nice work"},
        headers=headers(professor),
    )
    assert response.status_code == 200
    submission = response.json()["submissions"][0]
    assert submission["marks"] == 92
    assert submission["feedback"] == "Nice work"

    seen = client.get(f"/api/assignments/{assignment_id}", headers=headers(student)).json()
    assert seen["submissions"][0]["marks"] == 92


def test_duplicate_submission_conflicts(client, student, assignment, headers):
    path = f"/api/assignments/{assignment['assignment_id']}/submit"
    assert client.post(path, json={}, headers=headers(student)).status_code == 200
    response = client.post(path, json={}, headers=headers(student))
    assert response.status_code == 409
    assert response.json() == {"message": "Already submitted"}


def test_students_see_only_own_submission(client, professor, student, course_id, assignment, make_user, headers):
    classmate = make_user("student")
    client.post(
        f"/api/courses/{course_id}/students",
        json={"student_id": classmate.user_id},
        headers=headers(professor),
    )
    path = f"/api/assignments/{assignment['assignment_id']}"
    client.post(f"{path}/submit", json={}, headers=headers(student))
    client.post(f"{path}/submit", json={}, headers=headers(classmate))

    own_view = client.get(path, headers=headers(student)).json()
    assert own_view["submission_count"] == 2
    assert [s["student"]["user_id"] for s in own_view["submissions"]] == [student.user_id]

    professor_view = client.get(path, headers=headers(professor)).json()
    assert len(professor_view["submissions"]) == 2


def test_unenrolled_student_cannot_submit(client, assignment, make_user, headers):
    outsider = make_user("student")
    response = client.post(
        f"/api/assignments/{assignment['assignment_id']}/submit",
        json={},
        headers=headers(outsider),
    )
    assert response.status_code == 403


def test_professor_cannot_submit(client, professor, assignment, headers):
    response = client.post(
        f"/api/assignments/{assignment['assignment_id']}/submit",
        json={},
        headers=headers(professor),
    )
    assert response.status_code == 403


def test_grading_missing_submission(client, professor, student, assignment, headers):
    response = client.patch(
        f"/api/assignments/{assignment['assignment_id']}/submissions/{student.user_id}",
        json={"marks": 10},
        headers=headers(professor),
    )
    assert response.status_code == 404


def test_students_cannot_grade(client, student, assignment, headers):
    path = f"/api/assignments/{assignment['assignment_id']}"
    client.post(f"{path}/submit", json={}, headers=headers(student))
    response = client.patch(
        f"{path}/submissions/{student.user_id}", json={"marks": 100}, headers=headers(student)
    )
    assert response.status_code == 403


def test_assignment_requires_owned_course(client, course_id, make_user, headers):
    other = make_user("professor")
    response = client.post(
        "/api/assignments",
        json={"title": "Sneaky", "course_id": course_id},
        headers=headers(other),
    )
    assert response.status_code == 403


def test_assignment_for_missing_course(client, professor, headers):
    response = client.post(
        "/api/assignments",
        json={"title": "Orphan", "course_id": "missing"},
        headers=headers(professor),
    )
    assert response.status_code == 404


def test_outsiders_list_nothing(client, assignment, make_user, headers):
    other_professor = make_user("professor")
    unenrolled = make_user("student")
    assert client.get("/api/assignments", headers=headers(other_professor)).json() == []
    assert client.get("/api/assignments", headers=headers(unenrolled)).json() == []


def test_deleting_course_removes_its_assignments(
    client, professor, student, admin, course_id, assignment, headers
):
    client.post(
        f"/api/assignments/{assignment['assignment_id']}/submit",
        json={"file_url": "/ps1.pdf"},
        headers=headers(student),
    )
    material = client.post(
        "/api/study-materials",
        json={"title": "Lecture notes", "course_id": course_id},
        headers=headers(professor),
    ).json()

    response = client.delete(f"/api/courses/{course_id}", headers=headers(professor))
    assert response.status_code == 200

    for user in (student, professor, admin):
        assert client.get("/api/assignments", headers=headers(user)).json() == []
        assert client.get("/api/study-materials", headers=headers(user)).json() == []
    response = client.get(
        f"/api/study-materials/{material['material_id']}", headers=headers(admin)
    )
    assert response.status_code == 404
