"""Plumbing shared by the resource routers.

- `get_store`: FastAPI dependency returning the store opened at startup.
- `run_store_call`: runs a blocking store operation on the worker pool.
- `store_errors`: maps service/driver failures onto HTTPException.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Callable

from bson import ObjectId
from bson.errors import BSONError
from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from pymongo.errors import PyMongoError

from services.resource_service import DocumentNotFoundError
from services.resource_store import ResourceStore
from utils.object_ids import InvalidObjectIdError

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid ID format"

# Thread pool for blocking pymongo calls
executor = ThreadPoolExecutor(max_workers=16, thread_name_prefix="store")


def get_store(request: Request) -> ResourceStore:
    """Return the ResourceStore attached to the application at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Database is not initialized")
    return store


async def run_store_call(func: Callable[..., Any], *args: Any) -> Any:
    """Run func(*args) in the store thread pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, lambda: func(*args))


@contextmanager
def store_errors(action: str):
    """Translate failures raised inside the block into HTTP errors.

    Args:
        action: Human description used in 500 responses, e.g. "Error adding user".

    Raises:
        HTTPException: 400 for malformed ids, 404 when nothing matched,
            500 for driver or BSON encoding errors.
    """
    try:
        yield
    except InvalidObjectIdError:
        raise HTTPException(status_code=400, detail=INVALID_ID_MESSAGE)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (PyMongoError, BSONError, ValueError, OverflowError) as e:
        # Driver-side encoding errors (e.g. "$" keys, ints over 8 bytes) are store errors too.
        logger.exception("%s", action)
        raise HTTPException(status_code=500, detail={"error": action, "details": str(e)})


def to_json(documents: list[dict]) -> list[dict]:
    """Render stored documents as JSON-safe dicts (ObjectIds become strings)."""
    return jsonable_encoder(documents, custom_encoder={ObjectId: str})
