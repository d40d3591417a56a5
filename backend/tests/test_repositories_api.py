"""Tests for the /repositories endpoints."""

MISSING_ID = "5f0c2a9e1c4ae32b8c7d1e00"


def test_create_repository_and_list(client):
    """POST /repositories then GET /repositories/x includes the new document."""
    response = client.post("/repositories", json={"name": "repo-a"})

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Repository added"

    listing = client.get("/repositories/x")
    assert listing.status_code == 200
    assert {"_id": data["id"], "name": "repo-a"} in listing.json()


def test_list_repositories_returns_all(client):
    client.post("/repositories", json={"name": "a"})
    client.post("/repositories", json={"name": "b"})

    names = [repo["name"] for repo in client.get("/repositories/ignored").json()]

    assert names == ["a", "b"]


def test_replace_repository(client):
    repo_id = client.post("/repositories", json={"name": "a", "private": True}).json()["id"]

    response = client.put(f"/repositories/{repo_id}", json={"name": "b"})

    assert response.status_code == 200
    assert response.json() == {"message": "Repository updated", "modifiedCount": 1}
    assert client.get("/repositories/x").json() == [{"_id": repo_id, "name": "b"}]


def test_patch_repository(client):
    repo_id = client.post("/repositories", json={"name": "a"}).json()["id"]

    response = client.patch(f"/repositories/{repo_id}", json={"description": "demo"})

    assert response.status_code == 200
    assert response.json() == {"message": "Repository updated successfully", "modifiedCount": 1}
    repo = client.get("/repositories/x").json()[0]
    assert repo == {"_id": repo_id, "name": "a", "description": "demo"}


def test_repository_writes_reject_malformed_ids(client):
    for method in ("put", "patch", "delete"):
        kwargs = {} if method == "delete" else {"json": {"name": "x"}}
        response = getattr(client, method)("/repositories/not-valid", **kwargs)
        assert response.status_code == 400, method
        assert response.json() == {"error": "Invalid ID format"}


def test_repository_writes_on_missing_id(client):
    client.post("/repositories", json={"name": "keep"})

    for method in ("put", "patch", "delete"):
        kwargs = {} if method == "delete" else {"json": {"name": "x"}}
        response = getattr(client, method)(f"/repositories/{MISSING_ID}", **kwargs)
        assert response.status_code == 404, method
        assert response.json() == {"error": "Repository not found"}

    assert [r["name"] for r in client.get("/repositories/x").json()] == ["keep"]


def test_delete_repository_does_not_cascade(client):
    repo_id = client.post("/repositories", json={"name": "a"}).json()["id"]
    client.post("/commits", json={"repoId": repo_id, "message": "init"})
    client.post("/issues", json={"repoId": repo_id, "title": "bug"})

    response = client.delete(f"/repositories/{repo_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Repository deleted", "deletedCount": 1}
    assert len(client.get(f"/repositories/{repo_id}/commits").json()) == 1
    assert len(client.get(f"/repositories/{repo_id}/issues").json()) == 1
