"""Fork and star routes (insert-only)."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.common import get_store, run_store_call, store_errors
from models.resources import CreatedResponse
from services import resource_service
from services.resource_service import FORK, STAR
from services.resource_store import ResourceStore

router = APIRouter(tags=["engagement"])


@router.post("/forks", status_code=201, response_model=CreatedResponse)
async def create_fork(
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> CreatedResponse:
    with store_errors("Error adding fork"):
        new_id = await run_store_call(resource_service.create_resource, store, FORK, payload)
    return CreatedResponse(message="Fork added", id=new_id)


@router.post("/stars", status_code=201, response_model=CreatedResponse)
async def create_star(
    payload: dict[str, Any] = Body(default={}),
    store: ResourceStore = Depends(get_store),
) -> CreatedResponse:
    with store_errors("Error adding star"):
        new_id = await run_store_call(resource_service.create_resource, store, STAR, payload)
    return CreatedResponse(message="Star added", id=new_id)
