"""Tests for the /users endpoints."""

MISSING_ID = "507f1f77bcf86cd799439011"


def _create_user(client, payload=None) -> str:
    response = client.post("/users", json=payload or {"login": "octocat"})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def test_create_user_returns_201_and_id(client):
    response = client.post("/users", json={"login": "octocat", "email": "o@example.com"})

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User added"
    assert len(data["id"]) == 24


def test_list_users_ignores_path_param(client):
    user_id = _create_user(client)

    response = client.get("/users/anything")

    assert response.status_code == 200
    assert response.json() == [{"_id": user_id, "login": "octocat"}]


def test_create_user_accepts_empty_body(client):
    response = client.post("/users")
    assert response.status_code == 201


def test_create_user_rejects_non_object_body(client):
    response = client.post("/users", json=["not", "an", "object"])
    assert response.status_code == 422


def test_replace_user(client):
    user_id = _create_user(client, {"login": "octocat", "name": "Octo"})

    response = client.put(f"/users/{user_id}", json={"login": "hubot"})

    assert response.status_code == 200
    assert response.json() == {"message": "User updated", "modifiedCount": 1}
    assert client.get("/users/x").json() == [{"_id": user_id, "login": "hubot"}]


def test_replace_user_invalid_id(client):
    response = client.put("/users/123", json={"login": "hubot"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid ID format"}


def test_replace_user_not_found(client):
    response = client.put(f"/users/{MISSING_ID}", json={"login": "hubot"})

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_patch_user_merges_fields(client):
    user_id = _create_user(client, {"login": "octocat", "name": "Octo"})

    response = client.patch(f"/users/{user_id}", json={"name": "Octo Cat"})

    assert response.status_code == 200
    assert response.json()["modifiedCount"] == 1
    assert client.get("/users/x").json() == [
        {"_id": user_id, "login": "octocat", "name": "Octo Cat"}
    ]


def test_patch_user_is_idempotent(client):
    """Repeating an identical PATCH reports no modification the second time."""
    user_id = _create_user(client)

    first = client.patch(f"/users/{user_id}", json={"bio": "hello"})
    second = client.patch(f"/users/{user_id}", json={"bio": "hello"})

    assert first.json()["modifiedCount"] == 1
    assert second.status_code == 200
    assert second.json()["modifiedCount"] == 0


def test_patch_user_invalid_id(client):
    response = client.patch("/users/not-an-id", json={"bio": "x"})
    assert response.status_code == 400


def test_patch_user_not_found(client):
    response = client.patch(f"/users/{MISSING_ID}", json={"bio": "x"})
    assert response.status_code == 404


def test_delete_user_twice(client):
    user_id = _create_user(client)

    first = client.delete(f"/users/{user_id}")
    second = client.delete(f"/users/{user_id}")

    assert first.status_code == 200
    assert first.json() == {"message": "User deleted", "deletedCount": 1}
    assert second.status_code == 404
    assert second.json() == {"error": "User not found"}


def test_delete_missing_user(client):
    """DELETE of a well-formed id with no document returns 404 "User not found"."""
    _create_user(client)

    response = client.delete(f"/users/{MISSING_ID}")

    assert response.status_code == 404
    assert response.json()["error"] == "User not found"
    assert len(client.get("/users/x").json()) == 1


def test_delete_user_invalid_id(client):
    response = client.delete("/users/zzz")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid ID format"}
