"""API endpoint tests for groups and conferences."""

from mycap.config import get_settings

settings = get_settings()


def _set_reached_time_limit(client, headers, reached: bool):
    response = client.put(
        f"/api/v1/users/{headers.user_id}",
        headers=headers,
        json={"name": "Limited", "remaining_time": 0, "reached_time_limit": reached},
    )
    assert response.status_code == 200


def _user(client, username):
    users = client.get("/api/v1/users").json()["data"]
    return next(u for u in users if u["username"] == username)


def test_create_group(client, auth_headers):
    """Test creating a group makes the caller admin and sole participant."""
    response = client.post("/api/v1/groups", headers=auth_headers, json={"type": "Group"})
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Success create a new group."

    group = body["data"]
    assert group["type"] == "Group"
    assert group["admin_id"] == auth_headers.user_id
    assert group["admin_username"] == auth_headers.username
    assert group["admin"]["id"] == auth_headers.user_id
    assert [p["id"] for p in group["participants"]] == [auth_headers.user_id]


def test_create_conference(client, auth_headers):
    """Test creating a conference."""
    response = client.post("/api/v1/groups", headers=auth_headers, json={"type": "Conference"})
    assert response.status_code == 201
    assert response.json()["data"]["type"] == "Conference"


def test_create_group_invalid_type(client, auth_headers):
    """Test an unknown group type is rejected."""
    response = client.post("/api/v1/groups", headers=auth_headers, json={"type": "Chat Room"})
    assert response.status_code == 400
    assert response.json()["message"] == "Group type not specified."


def test_create_group_missing_body(client, auth_headers):
    """Test a body without a type is rejected."""
    response = client.post("/api/v1/groups", headers=auth_headers, json={})
    assert response.status_code == 400


def test_create_group_requires_token(client):
    """Test creating a group anonymously is rejected."""
    response = client.post("/api/v1/groups", json={"type": "Group"})
    assert response.status_code == 401


def test_create_group_already_exists(client, auth_headers):
    """Test a second group by the same admin conflicts."""
    client.post("/api/v1/groups", headers=auth_headers, json={"type": "Group"})

    response = client.post("/api/v1/groups", headers=auth_headers, json={"type": "Conference"})
    assert response.status_code == 400
    assert response.json()["message"] == "You already have a group chat or conference."


def test_create_group_conflict_checked_before_type(client, auth_headers):
    """Test the duplicate-admin check runs before type validation."""
    client.post("/api/v1/groups", headers=auth_headers, json={"type": "Group"})

    response = client.post("/api/v1/groups", headers=auth_headers, json={"type": "Chat Room"})
    assert response.json()["message"] == "You already have a group chat or conference."


def test_create_group_reached_time_limit(client, auth_headers):
    """Test a user out of quota cannot open a group, whatever the type."""
    _set_reached_time_limit(client, auth_headers, True)

    for group_type in ["Group", "Chat Room"]:
        response = client.post("/api/v1/groups", headers=auth_headers, json={"type": group_type})
        assert response.status_code == 400
        assert response.json()["message"] == "This user already reached time limit this month."


def test_get_groups(client, register):
    """Test listing groups expands admin and participants."""
    alice = register("alice")
    bob = register("bob")
    client.post("/api/v1/groups", headers=alice, json={"type": "Group"})
    client.post("/api/v1/join-groups", headers=bob, json={"admin_username": "alice"})

    response = client.get("/api/v1/groups")
    assert response.status_code == 200
    groups = response.json()["data"]
    assert len(groups) == 1
    assert groups[0]["admin"]["username"] == "alice"
    assert [p["username"] for p in groups[0]["participants"]] == ["alice", "bob"]


def test_join_group(client, register):
    """Test joining adds the caller to participants."""
    alice = register("alice")
    bob = register("bob")
    client.post("/api/v1/groups", headers=alice, json={"type": "Group"})

    response = client.post("/api/v1/join-groups", headers=bob, json={"admin_username": "alice"})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Success joining a group."
    assert bob.user_id in [p["id"] for p in body["data"]["participants"]]
    assert body["data"]["admin"]["username"] == "alice"


def test_join_group_not_found(client, auth_headers):
    """Test joining a group that does not exist."""
    response = client.post(
        "/api/v1/join-groups", headers=auth_headers, json={"admin_username": "nobody"}
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Group not found."


def test_leave_group_not_found(client, auth_headers):
    """Test leaving a group that does not exist."""
    response = client.post(
        "/api/v1/leave-groups",
        headers=auth_headers,
        json={"admin_username": "nobody", "remaining_time": 100},
    )
    assert response.status_code == 404


def test_leave_group_negative_remaining_time(client, auth_headers):
    """Test a negative remaining time is rejected."""
    response = client.post(
        "/api/v1/leave-groups",
        headers=auth_headers,
        json={"admin_username": auth_headers.username, "remaining_time": -1},
    )
    assert response.status_code == 400


def test_participant_leave_keeps_group_and_quota(client, register):
    """Test a participant leaving never deletes the group or touches their quota."""
    alice = register("alice")
    bob = register("bob")
    client.post("/api/v1/groups", headers=alice, json={"type": "Group"})
    client.post("/api/v1/join-groups", headers=bob, json={"admin_username": "alice"})

    response = client.post(
        "/api/v1/leave-groups",
        headers=bob,
        json={"admin_username": "alice", "remaining_time": 0},
    )
    assert response.status_code == 200
    group = response.json()["data"]
    assert [p["username"] for p in group["participants"]] == ["alice"]

    bob_user = _user(client, "bob")
    assert bob_user["remaining_time"] == settings.default_remaining_time
    assert bob_user["reached_time_limit"] is False
    assert len(client.get("/api/v1/groups").json()["data"]) == 1


def test_admin_leave_terminates_group(client, register):
    """Test the admin leaving deletes the group and settles the admin's quota."""
    alice = register("alice")
    bob = register("bob")
    client.post("/api/v1/groups", headers=alice, json={"type": "Conference"})
    client.post("/api/v1/join-groups", headers=bob, json={"admin_username": "alice"})

    response = client.post(
        "/api/v1/leave-groups",
        headers=alice,
        json={"admin_username": "alice", "remaining_time": 1200},
    )
    assert response.status_code == 200
    group = response.json()["data"]
    assert group["admin_username"] == "alice"
    assert group["participants"] == []

    alice_user = _user(client, "alice")
    assert alice_user["remaining_time"] == 1200
    assert alice_user["reached_time_limit"] is False

    assert client.get("/api/v1/groups").json()["data"] == []
    response = client.post("/api/v1/join-groups", headers=bob, json={"admin_username": "alice"})
    assert response.status_code == 404
    response = client.post(
        "/api/v1/leave-groups",
        headers=bob,
        json={"admin_username": "alice", "remaining_time": 0},
    )
    assert response.status_code == 404


def test_admin_can_open_new_group_after_leaving(client, auth_headers):
    """Test a terminated group frees the admin to create another."""
    client.post("/api/v1/groups", headers=auth_headers, json={"type": "Group"})
    client.post(
        "/api/v1/leave-groups",
        headers=auth_headers,
        json={"admin_username": auth_headers.username, "remaining_time": 60},
    )

    response = client.post("/api/v1/groups", headers=auth_headers, json={"type": "Group"})
    assert response.status_code == 201


def test_alice_and_bob_scenario(client, register):
    """Walk a full group lifecycle from creation to termination."""
    alice = register("alice")
    assert client.post("/api/v1/groups", headers=alice, json={"type": "Group"}).status_code == 201
    assert client.post("/api/v1/groups", headers=alice, json={"type": "Group"}).status_code == 400

    bob = register("bob")
    response = client.post("/api/v1/join-groups", headers=bob, json={"admin_username": "alice"})
    assert "bob" in [p["username"] for p in response.json()["data"]["participants"]]

    response = client.post(
        "/api/v1/leave-groups",
        headers=bob,
        json={"admin_username": "alice", "remaining_time": 0},
    )
    assert response.status_code == 200
    assert "bob" not in [p["username"] for p in response.json()["data"]["participants"]]
    assert len(client.get("/api/v1/groups").json()["data"]) == 1
    assert _user(client, "bob")["remaining_time"] == settings.default_remaining_time

    response = client.post(
        "/api/v1/leave-groups",
        headers=alice,
        json={"admin_username": "alice", "remaining_time": 0},
    )
    assert response.status_code == 200
    assert client.get("/api/v1/groups").json()["data"] == []
    assert _user(client, "alice")["reached_time_limit"] is True

    # Out of quota now, so no new group until the monthly reset
    response = client.post("/api/v1/groups", headers=alice, json={"type": "Group"})
    assert response.status_code == 400
    assert response.json()["message"] == "This user already reached time limit this month."


def test_deleting_admin_terminates_group(client, register):
    """Test deleting a user also closes the group they administer."""
    alice = register("alice")
    bob = register("bob")
    client.post("/api/v1/groups", headers=alice, json={"type": "Group"})
    client.post("/api/v1/join-groups", headers=bob, json={"admin_username": "alice"})

    response = client.delete(f"/api/v1/users/{alice.user_id}", headers=bob)
    assert response.status_code == 200
    assert client.get("/api/v1/groups").json()["data"] == []
