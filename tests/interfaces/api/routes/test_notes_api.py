"""Tests for the notes and task comment endpoints."""


def as_member(member_id):
    return {"X-Member-Id": member_id}


def test_create_note_requires_member_header(client):
    response = client.post("/notes/", json={"content": "hello"})

    assert response.status_code == 401


def test_unknown_member_is_rejected(client):
    response = client.post("/notes/", json={"content": "hello"}, headers=as_member("ZZZ"))

    assert response.status_code == 401


def test_create_note_notifies_mentioned_members(client):
    response = client.post(
        "/notes/",
        json={"content": "Ship it @[Bob](B1) @[Alice Admin](A1)"},
        headers=as_member("A1"),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["author_name"] == "Alice Admin"
    assert body["has_mentions"] is True

    inbox = client.get("/notifications/", headers=as_member("B1")).json()
    assert [entry["title"] for entry in inbox] == ["Alice Admin mentioned you in a note"]
    assert inbox[0]["link"] == f"/notes?open={body['id']}"
    assert client.get("/notifications/", headers=as_member("A1")).json() == []


def test_blank_content_is_rejected(client):
    response = client.post("/notes/", json={"content": "   "}, headers=as_member("A1"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Enter some content."


def test_note_segments_link_mentions(client):
    note = client.post(
        "/notes/", json={"content": "Hi @[Jane Doe](J1)!"}, headers=as_member("A1")
    ).json()

    segments = client.get(f"/notes/{note['id']}/segments").json()

    assert segments == [
        {"kind": "text", "text": "Hi "},
        {
            "kind": "mention",
            "display_name": "Jane Doe",
            "target_id": "J1",
            "link": "/members/J1",
        },
        {"kind": "text", "text": "!"},
    ]


def test_pin_and_delete_flow(client):
    headers = as_member("A1")
    first = client.post("/notes/", json={"content": "first"}, headers=headers).json()
    second = client.post("/notes/", json={"content": "second"}, headers=headers).json()

    assert client.put("/notes/pin", json={"target_id": first["id"]}, headers=headers).json()[
        "pinned"
    ]
    client.put("/notes/pin", json={"target_id": second["id"]}, headers=headers)

    notes = client.get("/notes/").json()
    assert [(n["id"], n["pinned"]) for n in notes] == [
        (second["id"], True),
        (first["id"], False),
    ]
    assert client.delete(f"/notes/{second['id']}", headers=headers).status_code == 409
    assert client.delete(f"/notes/{first['id']}", headers=headers).status_code == 204
    assert client.get(f"/notes/{first['id']}").status_code == 404
    assert client.put("/notes/pin", json={"target_id": 999}, headers=headers).status_code == 404


def test_task_comment_mentions_and_pin(client):
    response = client.post(
        "/tasks/T1/comments/",
        json={"content": "@[James Lee](J2) please review"},
        headers=as_member("J1"),
    )
    assert response.status_code == 201
    comment = response.json()

    pinned = client.put(
        "/tasks/T1/comments/pin", json={"target_id": comment["id"]}, headers=as_member("J1")
    )
    assert pinned.json()["pinned"] is True
    missing = client.put(
        "/tasks/T2/comments/pin", json={"target_id": comment["id"]}, headers=as_member("J1")
    )
    assert missing.status_code == 404

    inbox = client.get("/notifications/", headers=as_member("J2")).json()
    assert inbox[0]["title"] == "Jane Doe mentioned you in a task comment"
    assert inbox[0]["link"] == "/tasks?open=T1"


def test_mentionable_members(client):
    response = client.get("/members/mentionable", params={"query": "ja"})

    assert [m["id"] for m in response.json()] == ["J2", "J1"]


def test_mention_link_resolves_to_member(client):
    assert client.get("/members/J1").json()["display_name"] == "Jane Doe"
    assert client.get("/members/ZZZ").status_code == 404
