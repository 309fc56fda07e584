"""Lost-and-found tests."""


def post_item(client, user, headers, **fields):
    payload = {
        "title": "Blue umbrella",
        "description": "Left in the library",
        "type": "lost",
        "location": "Library",
        "category": "other",
    }
    payload.update(fields)
    response = client.post("/api/lost-found", json=payload, headers=headers(user))
    assert response.status_code == 201, response.json()
    return response.json()


def test_post_defaults(client, student, headers):
    item = post_item(client, student, headers)
    assert item["type"] == "lost"
    assert item["status"] == "active"
    assert item["posted_by"]["user_id"] == student.user_id
    assert item["contact"]["email"] == student.email
    assert item["date_of_incident"]


def test_only_students_post(client, professor, headers):
    response = client.post(
        "/api/lost-found",
        json={"title": "t", "description": "d", "type": "found", "location": "x", "category": "keys"},
        headers=headers(professor),
    )
    assert response.status_code == 403


def test_filters_and_closed_hidden(client, student, professor, headers):
    lost = post_item(client, student, headers, title="Lost keys", category="keys")
    found = post_item(client, student, headers, title="Found phone", type="found", category="electronics")
    closed = post_item(client, student, headers, title="Old bag", category="bag")
    client.put(
        f"/api/lost-found/{closed['item_id']}", json={"status": "closed"}, headers=headers(student)
    )

    everything = client.get("/api/lost-found", headers=headers(professor)).json()
    assert {i["item_id"] for i in everything} == {lost["item_id"], found["item_id"]}

    only_found = client.get("/api/lost-found", params={"type": "found"}, headers=headers(professor))
    assert [i["item_id"] for i in only_found.json()] == [found["item_id"]]

    by_category = client.get("/api/lost-found", params={"category": "keys"}, headers=headers(professor))
    assert [i["item_id"] for i in by_category.json()] == [lost["item_id"]]

    only_closed = client.get("/api/lost-found", params={"status": "closed"}, headers=headers(professor))
    assert [i["item_id"] for i in only_closed.json()] == [closed["item_id"]]


def test_mine_lists_own_posts(client, student, make_user, headers):
    other = make_user("student")
    mine = post_item(client, student, headers)
    post_item(client, other, headers, title="Not mine")
    response = client.get("/api/lost-found/mine", headers=headers(student))
    assert [i["item_id"] for i in response.json()] == [mine["item_id"]]


def test_match_marks_resolved(client, student, make_user, headers):
    finder = make_user("student")
    lost = post_item(client, student, headers)
    found = post_item(client, finder, headers, type="found", title="Umbrella found")

    response = client.put(
        f"/api/lost-found/{lost['item_id']}/match",
        json={"matched_item_id": found["item_id"]},
        headers=headers(student),
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "resolved"
    assert body["matched_with"]["item_id"] == found["item_id"]
    assert body["matched_with"]["type"] == "found"


def test_match_unknown_item(client, student, headers):
    lost = post_item(client, student, headers)
    response = client.put(
        f"/api/lost-found/{lost['item_id']}/match",
        json={"matched_item_id": "missing"},
        headers=headers(student),
    )
    assert response.status_code == 404


def test_non_owner_cannot_edit(client, student, make_user, headers):
    other = make_user("student")
    item = post_item(client, student, headers)
    path = f"/api/lost-found/{item['item_id']}"
    assert client.get(path, headers=headers(other)).status_code == 200
    assert client.put(path, json={"title": "Mine now"}, headers=headers(other)).status_code == 403
    assert client.delete(path, headers=headers(other)).status_code == 403


def test_owner_cannot_hand_over_posting(client, student, make_user, headers):
    other = make_user("student")
    item = post_item(client, student, headers)
    response = client.put(
        f"/api/lost-found/{item['item_id']}",
        json={"posted_by": other.user_id},
        headers=headers(student),
    )
    assert response.status_code == 403


def test_contact_patch_merges(client, student, headers):
    item = post_item(client, student, headers)
    response = client.put(
        f"/api/lost-found/{item['item_id']}",
        json={"contact": {"phone": "555-0199"}},
        headers=headers(student),
    )
    assert response.json()["contact"] == {"email": student.email, "phone": "555-0199"}


def test_deleting_matched_item_clears_link(client, student, make_user, headers):
    finder = make_user("student")
    lost = post_item(client, student, headers)
    found = post_item(client, finder, headers, type="found", title="Umbrella found")
    client.put(
        f"/api/lost-found/{lost['item_id']}/match",
        json={"matched_item_id": found["item_id"]},
        headers=headers(student),
    )

    assert client.delete(f"/api/lost-found/{found['item_id']}", headers=headers(finder)).status_code == 200
    body = client.get(f"/api/lost-found/{lost['item_id']}", headers=headers(student)).json()
    assert body["matched_with"] is None
    assert body["status"] == "resolved"
