"""Entry point for the hosting service FastAPI application."""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import router as api_router
from models.resources import ErrorResponse
from services.database import connect, load_database_settings
from services.resource_store import ResourceStore

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database connection before serving and close it afterwards.

    If a store was injected (tests), it is used as-is. Otherwise the server
    refuses to start when MongoDB cannot be reached.
    """
    if getattr(app.state, "store", None) is not None:
        yield
        return

    settings = load_database_settings()
    try:
        client, store = connect(settings)
    except PyMongoError as exc:
        logger.error("Error connecting to MongoDB: %s", exc)
        raise
    app.state.store = store
    try:
        yield
    finally:
        app.state.store = None
        client.close()
        logger.info("MongoDB connection closed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": ..., "details"?: ...}."""
    detail = exc.detail
    if isinstance(detail, dict):
        body = ErrorResponse(**detail)
    else:
        body = ErrorResponse(error=str(detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


def create_app(database: Database | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: Optional pre-opened database. When given, no connection is
            made at startup (used by tests).

    Returns:
        FastAPI: Configured application.
    """
    app = FastAPI(title="GitHub Resource API", version="0.1.0", lifespan=lifespan)
    app.state.store = ResourceStore(database) if database is not None else None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(api_router)

    @app.get("/")
    async def root() -> dict:
        """
        Simple heartbeat endpoint to confirm the API is online.

        Returns:
            dict: App metadata payload.
        """
        return {"status": "ok", "app": "GitHub Resource API"}

    return app


app = create_app()


def _port_from_env() -> int:
    raw = os.getenv("API_PORT", "").strip()
    if raw == "":
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid API_PORT value '%s'. Falling back to %s.", raw, DEFAULT_PORT)
        return DEFAULT_PORT


if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=os.getenv("API_HOST", DEFAULT_HOST), port=_port_from_env())
