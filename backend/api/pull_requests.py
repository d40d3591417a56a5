"""Pull request routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.common import get_store, run_store_call, store_errors, to_json
from models.resources import CreatedResponse, DeletedResponse
from services import resource_service
from services.resource_service import PULL_REQUEST
from services.resource_store import ResourceStore

router = APIRouter(tags=["pullRequests"])


@router.get("/repositories/{repo_id}/pullRequests")
async def list_pull_requests(
    repo_id: str, store: ResourceStore = Depends(get_store)
) -> list[dict]:
    """List pull requests (whole collection, repo_id is not applied)."""
    with store_errors("Error fetching pull requests"):
        pull_requests = await run_store_call(resource_service.list_resource, store, PULL_REQUEST)
    return to_json(pull_requests)


@router.post("/pullRequests", status_code=201, response_model=CreatedResponse)
async def create_pull_request(
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> CreatedResponse:
    with store_errors("Error adding pull request"):
        new_id = await run_store_call(
            resource_service.create_resource, store, PULL_REQUEST, payload
        )
    return CreatedResponse(message="Pull request added", id=new_id)


@router.delete("/pullRequests/{pull_request_id}", response_model=DeletedResponse)
async def delete_pull_request(
    pull_request_id: str, store: ResourceStore = Depends(get_store)
) -> DeletedResponse:
    with store_errors("Error deleting pull request"):
        deleted = await run_store_call(
            resource_service.delete_resource, store, PULL_REQUEST, pull_request_id
        )
    return DeletedResponse(message="Pull request deleted", deletedCount=deleted)
