"""Commit routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.common import get_store, run_store_call, store_errors, to_json
from models.resources import CreatedResponse, DeletedResponse
from services import resource_service
from services.resource_service import COMMIT
from services.resource_store import ResourceStore

router = APIRouter(tags=["commits"])


@router.get("/repositories/{repo_id}/commits")
async def list_commits(repo_id: str, store: ResourceStore = Depends(get_store)) -> list[dict]:
    """
    List commits belonging to a repository.

    Matches documents whose `repoId` field equals repo_id as a string.

    Raises:
        HTTPException: 404 if no commit matches.
    """
    with store_errors("Error fetching commits"):
        commits = await run_store_call(resource_service.list_commits_for_repo, store, repo_id)
    return to_json(commits)


@router.post("/commits", status_code=201, response_model=CreatedResponse)
async def create_commit(
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> CreatedResponse:
    with store_errors("Error adding commit"):
        new_id = await run_store_call(resource_service.create_resource, store, COMMIT, payload)
    return CreatedResponse(message="Commit added", id=new_id)


@router.delete("/commits/{commit_id}", response_model=DeletedResponse)
async def delete_commit(
    commit_id: str, store: ResourceStore = Depends(get_store)
) -> DeletedResponse:
    """
    Delete a commit.

    Unlike the other resources, a commit_id that is not an ObjectId is not
    rejected: it is matched against `_id` as a plain string.
    """
    with store_errors("Error deleting commit"):
        deleted = await run_store_call(
            resource_service.delete_resource_lenient, store, COMMIT, commit_id
        )
    return DeletedResponse(message="Commit deleted", deletedCount=deleted)
