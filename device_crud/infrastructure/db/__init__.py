from .mongo_connection import get_database, get_device_collection, close_connection
from .mongo_device_repository import MongoDeviceRepository

__all__ = [
    "get_database",
    "get_device_collection",
    "close_connection",
    "MongoDeviceRepository",
]
