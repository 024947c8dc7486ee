# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    # Explicit timeouts so an unreachable MongoDB fails the request instead of hanging
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=10000,
        connectTimeoutMS=10000,
        tz_aware=True,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_device_collection() -> AsyncIOMotorCollection:
    """
    Get devices collection from MongoDB

    Returns:
        MongoDB collection for devices
    """
    return get_database()[get_settings().mongo_device_collection]


def close_connection() -> None:
    """Close the MongoDB client if one was opened"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
