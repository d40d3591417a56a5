"""Shared fixtures: an in-memory MongoDB (mongomock) and an API client bound to it."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.resource_store import ResourceStore


@pytest.fixture
def database():
    """Fresh in-memory database per test."""
    client = mongomock.MongoClient()
    yield client["GitHub"]
    client.close()


@pytest.fixture
def store(database):
    return ResourceStore(database)


@pytest.fixture
def client(database):
    """TestClient for an app wired to the in-memory database."""
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client
