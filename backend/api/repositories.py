"""Repository routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.common import get_store, run_store_call, store_errors, to_json
from models.resources import CreatedResponse, DeletedResponse, UpdatedResponse
from services import resource_service
from services.resource_service import REPOSITORY
from services.resource_store import ResourceStore

router = APIRouter(tags=["repositories"])


@router.get("/repositories/{repo_id}")
async def list_repositories(
    repo_id: str, store: ResourceStore = Depends(get_store)
) -> list[dict]:
    """List every repository (repo_id is ignored)."""
    with store_errors("Error fetching repositories"):
        repositories = await run_store_call(resource_service.list_resource, store, REPOSITORY)
    return to_json(repositories)


@router.post("/repositories", status_code=201, response_model=CreatedResponse)
async def create_repository(
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> CreatedResponse:
    with store_errors("Error adding repository"):
        new_id = await run_store_call(
            resource_service.create_resource, store, REPOSITORY, payload
        )
    return CreatedResponse(message="Repository added", id=new_id)


@router.put("/repositories/{repo_id}", response_model=UpdatedResponse)
async def replace_repository(
    repo_id: str,
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> UpdatedResponse:
    with store_errors("Error updating repository"):
        outcome = await run_store_call(
            resource_service.replace_resource, store, REPOSITORY, repo_id, payload
        )
    return UpdatedResponse(message="Repository updated", modifiedCount=outcome.modified_count)


@router.patch("/repositories/{repo_id}", response_model=UpdatedResponse)
async def patch_repository(
    repo_id: str,
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> UpdatedResponse:
    with store_errors("Error updating repository"):
        outcome = await run_store_call(
            resource_service.patch_resource, store, REPOSITORY, repo_id, payload
        )
    return UpdatedResponse(
        message="Repository updated successfully", modifiedCount=outcome.modified_count
    )


@router.delete("/repositories/{repo_id}", response_model=DeletedResponse)
async def delete_repository(
    repo_id: str, store: ResourceStore = Depends(get_store)
) -> DeletedResponse:
    """
    Delete a repository.

    Issues, pull requests and commits referencing it are left in place.
    """
    with store_errors("Error deleting repository"):
        deleted = await run_store_call(
            resource_service.delete_resource, store, REPOSITORY, repo_id
        )
    return DeletedResponse(message="Repository deleted", deletedCount=deleted)
