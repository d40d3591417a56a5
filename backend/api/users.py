"""User routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.common import get_store, run_store_call, store_errors, to_json
from models.resources import CreatedResponse, DeletedResponse, UpdatedResponse
from services import resource_service
from services.resource_service import USER
from services.resource_store import ResourceStore

router = APIRouter(tags=["users"])


@router.get("/users/{user_id}")
async def list_users(user_id: str, store: ResourceStore = Depends(get_store)) -> list[dict]:
    """
    List every user.

    The path segment is accepted for compatibility but not used as a filter.
    """
    with store_errors("Error fetching users"):
        users = await run_store_call(resource_service.list_resource, store, USER)
    return to_json(users)


@router.post("/users", status_code=201, response_model=CreatedResponse)
async def create_user(
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> CreatedResponse:
    with store_errors("Error adding user"):
        new_id = await run_store_call(resource_service.create_resource, store, USER, payload)
    return CreatedResponse(message="User added", id=new_id)


@router.put("/users/{user_id}", response_model=UpdatedResponse)
async def replace_user(
    user_id: str,
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> UpdatedResponse:
    """Replace a user document completely."""
    with store_errors("Error updating user"):
        outcome = await run_store_call(
            resource_service.replace_resource, store, USER, user_id, payload
        )
    return UpdatedResponse(message="User updated", modifiedCount=outcome.modified_count)


@router.patch("/users/{user_id}", response_model=UpdatedResponse)
async def patch_user(
    user_id: str,
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> UpdatedResponse:
    """Merge the request body into a user document."""
    with store_errors("Error partially updating user"):
        outcome = await run_store_call(
            resource_service.patch_resource, store, USER, user_id, payload
        )
    return UpdatedResponse(message="User updated", modifiedCount=outcome.modified_count)


@router.delete("/users/{user_id}", response_model=DeletedResponse)
async def delete_user(user_id: str, store: ResourceStore = Depends(get_store)) -> DeletedResponse:
    with store_errors("Error deleting user"):
        deleted = await run_store_call(resource_service.delete_resource, store, USER, user_id)
    return DeletedResponse(message="User deleted", deletedCount=deleted)
