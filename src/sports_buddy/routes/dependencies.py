"""
FastAPI dependencies that inject the shared database handle into services.

Overriding `get_database` in `app.dependency_overrides` swaps the store for every
route, which is how the tests run against mock collections.
"""

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from sports_buddy.database import db_manager
from sports_buddy.managers.logging_manager import get_logger
from sports_buddy.services import AccountService, PostService
from sports_buddy.utils.errors import StoreError

logger = get_logger(prefix="[Dependencies]")


async def get_database() -> AsyncIOMotorDatabase:
    try:
        return await db_manager.acquire()
    except PyMongoError as e:
        logger.error("Database unavailable: %s", e, exc_info=True)
        raise StoreError("Database unavailable") from e


async def get_account_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> AccountService:
    return AccountService(database)


async def get_post_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> PostService:
    return PostService(database)
