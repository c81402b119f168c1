"""
MongoDB connection handling.

One Database instance is created per application and stored on
``app.state.database``. It owns the motor client and a point-in-time
connectivity flag checked by the /api gate.
"""
from typing import Any, Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from app.db_collections import COLL_EMPLOYEES
from app.config import DEFAULT_DB_NAME
from app.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)


class Collections:
    """Collection names used by the repositories."""

    EMPLOYEES = COLL_EMPLOYEES


class Database:
    """Holder for the MongoDB client and database handle."""

    def __init__(
        self,
        uri: Optional[str] = None,
        db_name: str = DEFAULT_DB_NAME,
        timeout_ms: int = 5000
    ):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Any = None
        self._connected = False

    @classmethod
    def from_handle(cls, db: Any) -> "Database":
        """
        Wrap an already opened database handle.

        Args:
            db: Object exposing ``db[collection_name]`` like a motor database

        Returns:
            Database marked as connected
        """
        database = cls()
        database.db = db
        database._connected = True
        return database

    @property
    def is_connected(self) -> bool:
        return self._connected and self.db is not None

    async def connect(self) -> bool:
        """
        Open the client and ping the server once.

        No retry is attempted: a failed ping leaves the service running in
        static-only mode.

        Returns:
            True if the server answered the ping
        """
        if not self.uri:
            logger.warning("No MongoDB URI provided. Server will run without database connection.")
            return False

        try:
            self.client = AsyncIOMotorClient(
                self.uri,
                serverSelectionTimeoutMS=self.timeout_ms,
                tz_aware=True
            )
            await self.client.admin.command("ping")
            self.db = self.client.get_default_database(default=self.db_name)
            self._connected = True
            logger.info(f"✅ Connected to MongoDB database '{self.db.name}'")
        except PyMongoError as e:
            logger.error(f"❌ MongoDB connection error: {e}")
            logger.warning("Server will continue without database connection...")
            if self.client is not None:
                self.client.close()
            self.client = None
            self.db = None
            self._connected = False

        return self._connected

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self._connected = False

    def get_collection(self, name: str) -> Any:
        """
        Get a collection by name.

        Raises:
            ServiceUnavailableError: If the database is not connected
        """
        if not self.is_connected:
            raise ServiceUnavailableError()
        return self.db[name]
