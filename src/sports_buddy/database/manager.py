"""
# Database Management Module

MongoDB infrastructure for the Sports Buddy API, built on the **Motor** async driver.

## Connection Lifecycle

1. **Instantiation** (module load): `db_manager` is created with no I/O.
2. **Connection** (startup): `connect()` creates the client and pings the server.
   The application lifespan calls it eagerly; `acquire()` calls it lazily for any
   caller that runs before or outside the lifespan.
3. **Operations** (runtime): every request reuses the same client and database
   handle. Nothing is reconnected per request.
4. **Disconnection** (shutdown): `disconnect()` closes the client.

The connection is established at most once per process. An `asyncio.Lock` guards
the establish step so concurrent first callers all wait for the same attempt.
There is no retry or backoff: a failed attempt is logged and re-raised, and at
startup that aborts the process.

## Usage

```python
from sports_buddy.database import db_manager

database = await db_manager.acquire()
account = await database.get_collection("users").find_one({"email": "a@b.co"})
```

## Module Attributes

Attributes:
    db_logger (Logger): Logger for database operations (`[DATABASE]`).
    perf_logger (Logger): Logger for timing metrics (`[DB_PERFORMANCE]`).
    health_logger (Logger): Logger for health checks (`[DB_HEALTH]`).
    db_manager (DatabaseManager): Process-wide singleton.
"""

import asyncio
import time
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import ConnectionFailure, PyMongoError, ServerSelectionTimeoutError

from sports_buddy.config import settings
from sports_buddy.managers.logging_manager import get_logger

db_logger = get_logger(prefix="[DATABASE]")
perf_logger = get_logger(prefix="[DB_PERFORMANCE]")
health_logger = get_logger(prefix="[DB_HEALTH]")


class DatabaseManager:
    """
    Owns the MongoDB client and the database handle shared by all requests.

    Attributes:
        client (`Optional[AsyncIOMotorClient]`): The Motor client. `None` until
            `connect()` succeeds.
        database (`Optional[AsyncIOMotorDatabase]`): The selected database. `None`
            until `connect()` succeeds.
    """

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None
        self._connect_lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self.database is not None

    async def connect(self) -> None:
        """
        Establish the MongoDB connection if it does not exist yet.

        Creates the client with the configured timeouts, selects
        `settings.MONGODB_DATABASE` and verifies reachability with a `ping`.
        Calling this again after a successful connection is a no-op.

        Raises:
            `ServerSelectionTimeoutError`: MongoDB is unreachable.
            `ConnectionFailure`: The connection was refused or authentication failed.
            `PyMongoError`: Any other driver error (for example a malformed URL).
        """
        if self.is_connected:
            return

        async with self._connect_lock:
            if self.is_connected:
                return

            start_time = time.time()
            db_logger.info("Starting MongoDB connection process")
            db_logger.info(
                "MongoDB connection config - Database: %s, ServerTimeout: %dms, ConnTimeout: %dms",
                settings.MONGODB_DATABASE,
                settings.MONGODB_SERVER_SELECTION_TIMEOUT,
                settings.MONGODB_CONNECTION_TIMEOUT,
            )

            client = None
            try:
                client = AsyncIOMotorClient(
                    settings.MONGODB_URL,
                    serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT,
                    connectTimeoutMS=settings.MONGODB_CONNECTION_TIMEOUT,
                )
                ping_start = time.time()
                await client.admin.command("ping")
                ping_duration = time.time() - ping_start
            except (ServerSelectionTimeoutError, ConnectionFailure) as e:
                db_logger.error("Failed to connect to MongoDB after %.3fs: %s", time.time() - start_time, e)
                if client is not None:
                    client.close()
                raise
            except PyMongoError as e:
                db_logger.error("MongoDB client error while connecting: %s", e)
                if client is not None:
                    client.close()
                raise

            self.client = client
            self.database = client[settings.MONGODB_DATABASE]

            total_duration = time.time() - start_time
            perf_logger.info(
                "MongoDB connection established successfully in %.3fs (ping: %.3fs)", total_duration, ping_duration
            )
            db_logger.info("Successfully connected to MongoDB database: %s", settings.MONGODB_DATABASE)

    async def acquire(self) -> AsyncIOMotorDatabase:
        """
        Return the shared database handle, connecting on first use.

        Returns:
            `AsyncIOMotorDatabase`: The database every operation reads and writes.
        """
        await self.connect()
        return self.database

    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        """
        Retrieve a collection from the connected database.

        Raises:
            `ConnectionError`: If `connect()` has not completed yet.
        """
        if self.database is None:
            raise ConnectionError("Database not connected")
        return self.database.get_collection(collection_name)

    async def create_indexes(self) -> None:
        """
        Create lookup indexes for the accounts and posts collections.

        None of them is unique: account email uniqueness is case-insensitive and is
        checked at registration, and several posts may share an email.
        """
        start_time = time.time()
        accounts = self.get_collection(settings.ACCOUNTS_COLLECTION)
        posts = self.get_collection(settings.POSTS_COLLECTION)

        await accounts.create_index([("email", ASCENDING)], name="email_lookup")
        await posts.create_index([("email", ASCENDING)], name="email_lookup")
        await posts.create_index([("sport", ASCENDING), ("location", ASCENDING)], name="sport_location_filter")

        perf_logger.info("Database indexes verified in %.3fs", time.time() - start_time)

    async def health_check(self) -> bool:
        """
        Ping MongoDB and report whether it answered.

        Never raises; any failure is logged and reported as `False`.
        """
        if self.client is None:
            health_logger.warning("Health check failed: No database client available")
            return False

        start_time = time.time()
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            health_logger.error("Database health check failed after %.3fs: %s", time.time() - start_time, e)
            return False

        perf_logger.debug("Database health check completed in %.3fs", time.time() - start_time)
        return True

    async def disconnect(self) -> None:
        """Close the MongoDB client. Safe to call when not connected."""
        if self.client is None:
            db_logger.warning("Disconnect called but no active MongoDB connection found")
            return

        self.client.close()
        self.client = None
        self.database = None
        db_logger.info("Successfully disconnected from MongoDB")


# Global singleton, connected during application startup
db_manager = DatabaseManager()
