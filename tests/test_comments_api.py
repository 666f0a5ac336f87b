# tests/test_comments_api.py

from datetime import datetime


def test_comments_keep_insertion_order_and_authors(client, make_user) -> None:
    alice_headers, alice = make_user("alice")
    bob_headers, bob = make_user("bob")
    task = client.post("/api/tasks", json={"title": "Plan sprint"}, headers=alice_headers).json()

    first = client.post(
        f"/api/tasks/{task['_id']}/comments", json={"text": "Kickoff on Monday"}, headers=alice_headers
    )
    second = client.post(
        f"/api/tasks/{task['_id']}/comments", json={"text": "Works for me"}, headers=bob_headers
    )

    assert first.status_code == 201
    assert second.status_code == 201

    thread = second.json()
    assert [c["text"] for c in thread] == ["Kickoff on Monday", "Works for me"]
    assert thread[0]["user"] == {"_id": alice["id"], "username": "alice"}
    assert thread[1]["user"] == {"_id": bob["id"], "username": "bob"}
    assert all(c["createdAt"] for c in thread)

    fetched = client.get(f"/api/tasks/{task['_id']}", headers=alice_headers).json()
    assert [c["text"] for c in fetched["comments"]] == ["Kickoff on Monday", "Works for me"]
    assert [c["user"]["username"] for c in fetched["comments"]] == ["alice", "bob"]


def test_first_comment_returns_single_item_thread(client, make_user) -> None:
    headers, user = make_user("alice")
    task = client.post("/api/tasks", json={"title": "Solo"}, headers=headers).json()

    response = client.post(f"/api/tasks/{task['_id']}/comments", json={"text": "note"}, headers=headers)

    body = response.json()
    assert len(body) == 1
    assert body[0]["text"] == "note"
    assert body[0]["user"]["_id"] == user["id"]
    assert len(body[0]["_id"]) == 24


def test_comment_refreshes_task_update_time(client, make_user) -> None:
    headers, _ = make_user("alice")
    task = client.post("/api/tasks", json={"title": "Touch"}, headers=headers).json()

    client.post(f"/api/tasks/{task['_id']}/comments", json={"text": "ping"}, headers=headers)
    fetched = client.get(f"/api/tasks/{task['_id']}", headers=headers).json()

    assert datetime.fromisoformat(fetched["updatedAt"]) >= datetime.fromisoformat(task["updatedAt"])
    assert fetched["createdAt"] == task["createdAt"]


def test_comment_on_unknown_task_is_not_found(client, make_user) -> None:
    headers, _ = make_user("alice")

    response = client.post("/api/tasks/missing/comments", json={"text": "hello"}, headers=headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Task not found"}


def test_comment_requires_text(client, make_user) -> None:
    headers, _ = make_user("alice")
    task = client.post("/api/tasks", json={"title": "Quiet"}, headers=headers).json()

    response = client.post(f"/api/tasks/{task['_id']}/comments", json={}, headers=headers)

    assert response.status_code == 400
    fetched = client.get(f"/api/tasks/{task['_id']}", headers=headers).json()
    assert fetched["comments"] == []
