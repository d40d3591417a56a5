"""MongoDB connection setup for the API server.

Settings are read from environment variables once at startup. The connection
is verified with a ping before the server starts accepting requests.
"""

import logging
import os
from dataclasses import dataclass

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from services.resource_store import ResourceStore

logger = logging.getLogger(__name__)

DEFAULT_MONGODB_URI = "mongodb://127.0.0.1:27017"
DEFAULT_DB_NAME = "GitHub"
DEFAULT_TIMEOUT_MS = 5000


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters for the document store."""

    uri: str = DEFAULT_MONGODB_URI
    db_name: str = DEFAULT_DB_NAME
    timeout_ms: int = DEFAULT_TIMEOUT_MS


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s value '%s'. Falling back to %s.", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Invalid %s value '%s'. Falling back to %s.", name, raw, default)
        return default
    return value


def load_database_settings() -> DatabaseSettings:
    """Read MongoDB settings from the environment.

    Environment variables:
        MONGODB_URI: Connection string (default mongodb://127.0.0.1:27017).
        MONGODB_DB_NAME: Database name (default GitHub).
        MONGODB_TIMEOUT_MS: Server selection timeout in milliseconds (default 5000).

    Returns:
        DatabaseSettings: Resolved settings.
    """
    return DatabaseSettings(
        uri=os.getenv("MONGODB_URI", "").strip() or DEFAULT_MONGODB_URI,
        db_name=os.getenv("MONGODB_DB_NAME", "").strip() or DEFAULT_DB_NAME,
        timeout_ms=_int_from_env("MONGODB_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
    )


def connect(settings: DatabaseSettings) -> tuple[MongoClient, ResourceStore]:
    """Open a client, verify it with a ping and wrap the database in a store.

    Args:
        settings: Connection parameters.

    Returns:
        tuple[MongoClient, ResourceStore]: The open client (to be closed on
        shutdown) and the store bound to the configured database.

    Raises:
        PyMongoError: If the server cannot be reached.
    """
    client = MongoClient(settings.uri, serverSelectionTimeoutMS=settings.timeout_ms)
    store = ResourceStore(client[settings.db_name])
    try:
        store.ping()
    except PyMongoError:
        client.close()
        raise
    logger.info("Connected to MongoDB (database %s)", settings.db_name)
    return client, store
