"""
Database connection management for MongoDB.

The store handle is created once during application startup and kept on
``app.state``; request handlers receive it through dependencies instead of
reaching for a module-level client.
"""
import logging
from dataclasses import dataclass

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import ConfigurationError as MongoConfigurationError

from app.config import Settings
from app.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Store:
    """Live MongoDB session bound to one database."""

    client: AsyncIOMotorClient
    db: AsyncIOMotorDatabase

    def collection(self, name: str) -> AsyncIOMotorCollection:
        """Get a collection of the bound database by name."""
        return self.db[name]

    async def ping(self) -> dict:
        """Round-trip to the server; raises the driver error on failure."""
        return await self.client.admin.command("ping")

    def close(self) -> None:
        """Close the underlying client."""
        self.client.close()


def create_mongo_client(database_url: str) -> AsyncIOMotorClient:
    """Create a MongoDB client for a connection string."""
    return AsyncIOMotorClient(database_url)


def resolve_database(client: AsyncIOMotorClient, default_name: str) -> AsyncIOMotorDatabase:
    """Pick the database named in the connection string, else the default."""
    try:
        return client.get_default_database()
    except MongoConfigurationError:
        return client[default_name]


async def connect_store(settings: Settings) -> Store:
    """
    Open the process-wide store handle.

    Raises:
        ConfigurationError: If DATABASE_URL is missing or blank
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    database_url = (settings.database_url or "").strip()
    if not database_url:
        raise ConfigurationError("DATABASE_URL environment variable is not specified")

    client = create_mongo_client(database_url)
    store = Store(client=client, db=resolve_database(client, settings.database_name))

    try:
        await store.ping()
    except Exception:
        client.close()
        raise

    logger.info(f"Connected to MongoDB database '{store.db.name}'")
    return store
