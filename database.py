import asyncio
import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from config import Settings
from utils import redact_uri

logger = logging.getLogger("database")

DEFAULT_DATABASE = "test"


class DatabaseConnectionError(Exception):
    """MongoDB could not be reached, or the connection string is missing/invalid."""


class MongoConnection:
    """
    Connection handle owned by the application.
    - connect() verifies the server with a ping and reuses the verified client afterwards
    - close() releases the client on shutdown
    """

    def __init__(self, settings: Settings, client_factory=AsyncMongoClient):
        self.settings = settings
        self._client_factory = client_factory
        self._client = None
        self._db = None
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._db is not None

    async def connect(self):
        if self._db is not None:
            logger.info("Already connected to MongoDB")
            return self._db

        async with self._lock:
            if self._db is not None:
                return self._db

            uri = self.settings.mongodb_uri
            if not uri:
                raise DatabaseConnectionError("MONGODB_URI is not set")

            client = None
            try:
                client = self._client_factory(uri, serverSelectionTimeoutMS=self.settings.timeout_ms)
                await client.admin.command("ping")
                if self.settings.database_name:
                    db = client[self.settings.database_name]
                else:
                    db = client.get_default_database(DEFAULT_DATABASE)
            except (PyMongoError, ValueError) as e:
                logger.error("Error connecting to MongoDB at %s: %s", redact_uri(uri), e)
                if client is not None:
                    await client.close()
                raise DatabaseConnectionError(str(e)) from e

            self._client, self._db = client, db
            logger.info("MongoDB connected (%s, database=%s)", redact_uri(uri), db.name)
            return db

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None


# ---- fastapi dependencies ----
def get_connection(request: Request) -> MongoConnection:
    return request.app.state.connection
