# tests/test_users_api.py


def test_list_users_omits_password(client, make_user) -> None:
    headers, alice = make_user("alice")
    make_user("bob", role="manager")

    response = client.get("/api/users", headers=headers)

    assert response.status_code == 200
    users = response.json()
    assert [u["username"] for u in users] == ["alice", "bob"]
    assert users[0]["_id"] == alice["id"]
    assert users[0]["email"] == "alice@example.com"
    assert users[0]["role"] == "employee"
    assert users[1]["role"] == "manager"
    assert "createdAt" in users[0]
    for user in users:
        assert "password" not in user
        assert "password_hash" not in user
        assert "passwordHash" not in user


def test_list_users_open_to_any_role(client, make_user) -> None:
    headers, _ = make_user("eve", role="employee")

    response = client.get("/api/users", headers=headers)

    assert response.status_code == 200
