# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device
from ...domain.models.device_state import DeviceState
from ...domain.constants import DeviceFields
from ...domain.exceptions import DeviceError, ErrorKind, storage_failure
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_device_collection

logger = logging.getLogger(__name__)

# Errors raised while talking to MongoDB or mapping a stored document back
_STORAGE_ERRORS = (PyMongoError, KeyError, ValueError, TypeError)


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        if not device_id:
            return None

        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: device_id})
            if document is None:
                return None
            return self._document_to_device(document)
        except _STORAGE_ERRORS as e:
            logger.error(f"Error fetching device with id {device_id}: {e}", exc_info=True)
            raise storage_failure("Failed to fetch device", e) from e

    async def exists_by_id(self, device_id: str) -> bool:
        """Check whether a device with this ID is stored"""
        try:
            count = await self.device_collection.count_documents({DeviceFields.MONGO_ID: device_id}, limit=1)
            return count > 0
        except PyMongoError as e:
            logger.error(f"Error checking device existence: {e}", exc_info=True)
            raise storage_failure("Failed to verify device existence", e) from e

    async def find_all(self) -> List[Device]:
        """List every device"""
        return await self._find_many({}, "Failed to fetch devices")

    async def find_by_brand(self, brand: str) -> List[Device]:
        """List devices of a brand"""
        return await self._find_many({DeviceFields.BRAND: brand}, "Failed to fetch devices by brand")

    async def find_by_state(self, state: DeviceState) -> List[Device]:
        """List devices in a state"""
        return await self._find_many({DeviceFields.STATE: state.value}, "Failed to fetch devices by state")

    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> List[Device]:
        """List devices matching both brand and state"""
        return await self._find_many(
            {DeviceFields.BRAND: brand, DeviceFields.STATE: state.value},
            "Failed to fetch devices by brand and state",
        )

    async def save(self, device: Device) -> Device:
        """Save device (insert new or replace the stored device with the same ID)"""
        if not device:
            raise ValueError("Device cannot be None")

        try:
            device_dict = self._device_to_dict(device)
            await self.device_collection.replace_one(
                {DeviceFields.MONGO_ID: device.id},
                device_dict,
                upsert=True,
            )

            saved_document = await self.device_collection.find_one({DeviceFields.MONGO_ID: device.id})
            if saved_document is None:
                raise DeviceError(
                    ErrorKind.STORAGE_FAILURE,
                    "Failed to save device",
                    cause="Device was saved but could not be retrieved",
                )
            return self._document_to_device(saved_document)
        except _STORAGE_ERRORS as e:
            logger.error(f"Error saving device {device.id}: {e}", exc_info=True)
            raise storage_failure("Failed to save device", e) from e

    async def delete_by_id(self, device_id: str) -> None:
        """Physically remove a device"""
        try:
            await self.device_collection.delete_one({DeviceFields.MONGO_ID: device_id})
        except PyMongoError as e:
            logger.error(f"Error deleting device {device_id}: {e}", exc_info=True)
            raise storage_failure("Failed to delete device", e) from e

    async def set_brand_if_not_in_use(self, device_id: str, brand: str) -> int:
        """Set the brand only where the ID matches and the state is not IN_USE, in one write"""
        try:
            result = await self.device_collection.update_one(
                {
                    DeviceFields.MONGO_ID: device_id,
                    DeviceFields.STATE: {"$ne": DeviceState.IN_USE.value},
                },
                {"$set": {DeviceFields.BRAND: brand}},
            )
            return result.modified_count
        except PyMongoError as e:
            logger.error(f"Error updating brand of device {device_id}: {e}", exc_info=True)
            raise storage_failure("Failed to update brand", e) from e

    async def _find_many(self, query: Dict[str, Any], operation: str) -> List[Device]:
        try:
            cursor = self.device_collection.find(query)
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except _STORAGE_ERRORS as e:
            logger.error(f"{operation}: {e}", exc_info=True)
            raise storage_failure(operation, e) from e

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model"""
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        state = DeviceState.from_string(document.get(DeviceFields.STATE))
        if state is DeviceState.INVALID:
            raise ValueError(f"Stored device has unknown state: {document.get(DeviceFields.STATE)!r}")

        return Device(
            id=str(document[DeviceFields.MONGO_ID]),
            name=document.get(DeviceFields.NAME, ""),
            brand=document.get(DeviceFields.BRAND, ""),
            state=state,
            creation_time=ensure_utc(document.get(DeviceFields.CREATION_TIME)),
        )

    def _device_to_dict(self, device: Device) -> Dict[str, Any]:
        """Convert Device domain model to MongoDB document"""
        if not device:
            raise ValueError("Device cannot be None")

        return {
            DeviceFields.MONGO_ID: device.id,
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: device.state.value,
            DeviceFields.CREATION_TIME: ensure_utc(device.creation_time),
        }
