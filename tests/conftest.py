"""
Shared fixtures: mock Motor collections, a mock database and an HTTP client bound
to the application with the database dependency overridden.
"""
import os

# Settings validate the connection string at import time
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from bson import ObjectId

from sports_buddy.config import settings


def make_collection(documents=None, find_one=None, modified_count=1, matched_count=1):
    """Build a mock Motor collection.

    `find()` is synchronous in Motor and returns a cursor, so only the cursor's
    `to_list()` and the single-document calls are awaitable.
    """
    collection = MagicMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=list(documents or []))
    collection.find = MagicMock(return_value=cursor)
    collection.find_one = AsyncMock(return_value=find_one)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    collection.update_one = AsyncMock(
        return_value=MagicMock(modified_count=modified_count, matched_count=matched_count)
    )
    return collection


@pytest.fixture
def accounts_collection():
    return make_collection()


@pytest.fixture
def posts_collection():
    return make_collection()


@pytest.fixture
def mock_database(accounts_collection, posts_collection):
    collections = {
        settings.ACCOUNTS_COLLECTION: accounts_collection,
        settings.POSTS_COLLECTION: posts_collection,
    }
    database = MagicMock()
    database.get_collection.side_effect = lambda name: collections[name]
    return database


@pytest_asyncio.fixture
async def client(mock_database):
    from sports_buddy.main import app
    from sports_buddy.routes.dependencies import get_database

    app.dependency_overrides[get_database] = lambda: mock_database
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
