"""API route definitions for the hosting service."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pymongo.errors import PyMongoError

from api import commits, engagement, issues, pull_requests, repositories, users
from api.common import get_store, run_store_call
from services.resource_store import ResourceStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(store: ResourceStore = Depends(get_store)) -> dict:
    """
    Lightweight endpoint for uptime checks.

    Pings the database so a lost connection shows up as 503.

    Returns:
        dict: Health status payload.
    """
    try:
        await run_store_call(store.ping)
    except PyMongoError as e:
        logger.warning("Health check: database ping failed: %s", e)
        raise HTTPException(
            status_code=503, detail={"error": "Database unavailable", "details": str(e)}
        )
    return {"status": "healthy"}


# ============================================================================
# RESOURCE ENDPOINTS
# ============================================================================

router.include_router(users.router)
router.include_router(repositories.router)
router.include_router(issues.router)
router.include_router(pull_requests.router)
router.include_router(commits.router)
router.include_router(engagement.router)
