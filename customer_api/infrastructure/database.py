"""Database Client Manager — one motor client per process with a ping health check.

Invariants:
    - Single AsyncIOMotorClient per process (initialized via init_db, closed via close_db)
    - Client is tz_aware: datetimes read back from MongoDB carry UTC tzinfo
    - get_db raises if called before init_db (no lazy connection on first request)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - ping() reports round-trip latency so readiness can expose it
    - Connection pooling, retries and server selection belong to the driver
"""

import logging
import time

from motor.motor_asyncio import (
    AsyncIOMotorClient, AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class MongoManager:
    """Owns the motor client and the application database handle."""

    def __init__(
        self, mongodb_uri: str, database_name: str, timeout_ms: int = 5000,
    ):
        self.client = AsyncIOMotorClient(
            mongodb_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=timeout_ms,
        )
        self.database_name = database_name
        self.database: AsyncIOMotorDatabase = self.client[database_name]

    async def ping(self) -> float | None:
        """Round trip of an admin ping in milliseconds, None when unreachable."""
        started = time.perf_counter()
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB ping to {self.database_name} failed: {e}")
            return None
        return (time.perf_counter() - started) * 1000

    def close(self) -> None:
        self.client.close()


# Singleton (initialized on startup)
db_manager: MongoManager | None = None


def init_db(mongodb_uri: str, database_name: str, **kwargs):
    global db_manager
    db_manager = MongoManager(mongodb_uri, database_name, **kwargs)


def close_db():
    global db_manager
    if db_manager:
        db_manager.close()
        db_manager = None


def get_db() -> AsyncIOMotorDatabase:
    """FastAPI dependency for the application database."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager.database
