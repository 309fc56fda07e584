"""Event and registration tests."""

import pytest


def create_event(client, club, headers, **fields):
    payload = {"title": "Robot Wars", "date": "2030-03-01", "location": "Hall A"}
    payload.update(fields)
    response = client.post("/api/events", json=payload, headers=headers(club))
    assert response.status_code == 201, response.json()
    return response.json()


@pytest.fixture
def event(client, club, headers):
    return create_event(client, club, headers, max_participants=2)


def test_club_is_owner(client, club, make_user, headers):
    other_club = make_user("club")
    event = create_event(client, club, headers, club_id=other_club.user_id)
    assert event["club"]["user_id"] == club.user_id
    assert event["registered_count"] == 0


def test_students_cannot_create_events(client, student, headers):
    response = client.post("/api/events", json={"title": "Party"}, headers=headers(student))
    assert response.status_code == 403


def test_bad_date_is_validation_error(client, club, headers):
    response = client.post(
        "/api/events", json={"title": "Party", "date": "next tuesday"}, headers=headers(club)
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("date:")


def test_clubs_see_only_their_own_events(client, club, student, make_user, headers):
    other_club = make_user("club")
    mine = create_event(client, club, headers, title="Mine")
    theirs = create_event(client, other_club, headers, title="Theirs")

    listed = client.get("/api/events", headers=headers(club)).json()
    assert [e["event_id"] for e in listed] == [mine["event_id"]]
    response = client.get(f"/api/events/{theirs['event_id']}", headers=headers(club))
    assert response.status_code == 403

    assert len(client.get("/api/events", headers=headers(student)).json()) == 2


def test_events_ordered_by_date(client, club, student, headers):
    create_event(client, club, headers, title="Later", date="2030-05-01")
    create_event(client, club, headers, title="Sooner", date="2030-02-01")
    titles = [e["title"] for e in client.get("/api/events", headers=headers(student)).json()]
    assert titles == ["Sooner", "Later"]


def test_register_and_check(client, event, student, headers):
    path = f"/api/events/{event['event_id']}"
    assert client.get(f"{path}/check-registration", headers=headers(student)).json() == {
        "is_registered": False
    }

    response = client.post(f"{path}/register", headers=headers(student))
    assert response.status_code == 200
    assert response.json()["registered_count"] == 1
    assert client.get(f"{path}/check-registration", headers=headers(student)).json() == {
        "is_registered": True
    }


def test_duplicate_registration_conflicts(client, event, student, headers):
    path = f"/api/events/{event['event_id']}/register"
    client.post(path, headers=headers(student))
    response = client.post(path, headers=headers(student))
    assert response.status_code == 409
    event_view = client.get(f"/api/events/{event['event_id']}", headers=headers(student)).json()
    assert event_view["registered_count"] == 1


def test_capacity_is_enforced(client, event, make_user, headers):
    students = [make_user("student") for _ in range(3)]
    path = f"/api/events/{event['event_id']}/register"

    assert client.post(path, headers=headers(students[0])).status_code == 200
    assert client.post(path, headers=headers(students[1])).status_code == 200
    response = client.post(path, headers=headers(students[2]))
    assert response.status_code == 409
    assert response.json() == {"message": "Event is full"}


def test_count_tracks_registrations(client, club, make_user, headers):
    event = create_event(client, club, headers)
    path = f"/api/events/{event['event_id']}"
    students = [make_user("student") for _ in range(4)]
    for s in students:
        client.post(f"{path}/register", headers=headers(s))
    for s in students[:3]:
        assert client.put(f"{path}/unregister", headers=headers(s)).status_code == 200

    organizer_view = client.get(path, headers=headers(club)).json()
    assert organizer_view["registered_count"] == 1
    assert len(organizer_view["registered_students"]) == 1


def test_students_see_only_own_registration(client, event, student, make_user, headers):
    classmate = make_user("student")
    path = f"/api/events/{event['event_id']}"
    client.post(f"{path}/register", headers=headers(student))
    client.post(f"{path}/register", headers=headers(classmate))

    view = client.get(path, headers=headers(student)).json()
    assert view["registered_count"] == 2
    assert [r["student"]["user_id"] for r in view["registered_students"]] == [student.user_id]


def test_unregister_when_not_registered(client, event, student, headers):
    response = client.put(f"/api/events/{event['event_id']}/unregister", headers=headers(student))
    assert response.status_code == 400


def test_registration_closed(client, club, student, headers):
    event = create_event(client, club, headers, register_by="2000-01-01")
    response = client.post(f"/api/events/{event['event_id']}/register", headers=headers(student))
    assert response.status_code == 400


def test_only_students_register(client, event, professor, headers):
    response = client.post(f"/api/events/{event['event_id']}/register", headers=headers(professor))
    assert response.status_code == 403


def test_organizer_cannot_reassign_event(client, event, club, make_user, headers):
    other_club = make_user("club")
    response = client.put(
        f"/api/events/{event['event_id']}",
        json={"club_id": other_club.user_id},
        headers=headers(club),
    )
    assert response.status_code == 403


def test_update_does_not_touch_counter(client, event, club, student, headers):
    path = f"/api/events/{event['event_id']}"
    client.post(f"{path}/register", headers=headers(student))
    response = client.put(
        path, json={"location": "Hall B", "registered_count": 50}, headers=headers(club)
    )
    assert response.status_code == 200
    assert response.json()["location"] == "Hall B"
    assert response.json()["registered_count"] == 1


def test_delete_event(client, event, club, student, headers):
    path = f"/api/events/{event['event_id']}"
    assert client.delete(path, headers=headers(student)).status_code == 403
    assert client.delete(path, headers=headers(club)).status_code == 200
    assert client.get(path, headers=headers(club)).status_code == 404


def test_freed_seat_goes_to_refused_student(client, event, make_user, headers):
    first, second, third = [make_user("student") for _ in range(3)]
    path = f"/api/events/{event['event_id']}"

    assert client.post(f"{path}/register", headers=headers(first)).status_code == 200
    assert client.post(f"{path}/register", headers=headers(second)).json()["registered_count"] == 2
    assert client.post(f"{path}/register", headers=headers(third)).status_code == 409

    assert client.put(f"{path}/unregister", headers=headers(first)).status_code == 200
    response = client.post(f"{path}/register", headers=headers(third))
    assert response.status_code == 200
    assert response.json()["registered_count"] == 2


def test_deleting_registered_student_releases_seat(client, event, club, admin, student, headers):
    path = f"/api/events/{event['event_id']}"
    client.post(f"{path}/register", headers=headers(student))

    response = client.delete(f"/api/users/{student.user_id}", headers=headers(admin))
    assert response.status_code == 200

    view = client.get(path, headers=headers(club)).json()
    assert view["registered_count"] == 0
    assert view["registered_students"] == []


def test_admin_reassigns_event_to_a_club_only(client, event, admin, professor, make_user, headers):
    path = f"/api/events/{event['event_id']}"
    response = client.put(path, json={"club_id": professor.user_id}, headers=headers(admin))
    assert response.status_code == 400

    other_club = make_user("club")
    response = client.put(path, json={"club_id": other_club.user_id}, headers=headers(admin))
    assert response.status_code == 200
    assert response.json()["club"]["user_id"] == other_club.user_id
