"""Issue routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from api.common import get_store, run_store_call, store_errors, to_json
from models.resources import CreatedResponse, DeletedResponse, UpdatedResponse
from services import resource_service
from services.resource_service import ISSUE
from services.resource_store import ResourceStore
from utils.object_ids import parse_object_id

router = APIRouter(tags=["issues"])


@router.get("/repositories/{repo_id}/issues")
async def list_issues(repo_id: str, store: ResourceStore = Depends(get_store)) -> list[dict]:
    """
    List issues.

    Returns the whole issues collection; repo_id is not applied as a filter.
    """
    with store_errors("Error fetching issues"):
        issues = await run_store_call(resource_service.list_resource, store, ISSUE)
    return to_json(issues)


@router.post("/issues", status_code=201, response_model=CreatedResponse)
async def create_issue(
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> CreatedResponse:
    with store_errors("Error adding issue"):
        new_id = await run_store_call(resource_service.create_resource, store, ISSUE, payload)
    return CreatedResponse(message="Issue added", id=new_id)


@router.patch("/issues/{issue_id}/status", response_model=UpdatedResponse)
async def update_issue_status(
    issue_id: str,
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> UpdatedResponse:
    """
    Update only the `status` field of an issue.

    Request body:
        {"status": "closed"}

    Raises:
        HTTPException: 400 if the id is malformed or status is missing/empty.
        HTTPException: 404 if the issue does not exist.
    """
    with store_errors("Error updating issue status"):
        # Id syntax is checked before the body.
        parse_object_id(issue_id)
        status = payload.get("status")
        if not status:
            raise HTTPException(status_code=400, detail="Status is required")
        outcome = await run_store_call(
            resource_service.update_issue_status, store, issue_id, status
        )
    return UpdatedResponse(
        message="Issue status updated successfully", modifiedCount=outcome.modified_count
    )


@router.delete("/issues/{issue_id}", response_model=DeletedResponse)
async def delete_issue(issue_id: str, store: ResourceStore = Depends(get_store)) -> DeletedResponse:
    with store_errors("Error deleting issue"):
        deleted = await run_store_call(resource_service.delete_resource, store, ISSUE, issue_id)
    return DeletedResponse(message="Issue deleted", deletedCount=deleted)
