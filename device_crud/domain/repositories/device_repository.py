from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.device import Device
from ..models.device_state import DeviceState


class DeviceRepository(ABC):
    """
    Repository interface - defines contract for device data access.

    Implementations raise DeviceError(STORAGE_FAILURE) when the underlying
    store fails; they never decide on business rules.
    """

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass

    @abstractmethod
    async def exists_by_id(self, device_id: str) -> bool:
        """Check whether a device with this ID is stored"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Device]:
        """List every device"""
        pass

    @abstractmethod
    async def find_by_brand(self, brand: str) -> List[Device]:
        """List devices of a brand"""
        pass

    @abstractmethod
    async def find_by_state(self, state: DeviceState) -> List[Device]:
        """List devices in a state"""
        pass

    @abstractmethod
    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> List[Device]:
        """List devices matching both brand and state"""
        pass

    @abstractmethod
    async def save(self, device: Device) -> Device:
        """Save device (insert, or replace the stored device with the same ID)"""
        pass

    @abstractmethod
    async def delete_by_id(self, device_id: str) -> None:
        """Physically remove a device"""
        pass

    @abstractmethod
    async def set_brand_if_not_in_use(self, device_id: str, brand: str) -> int:
        """
        Set the brand of a device in a single conditional update.

        The update only applies when the ID matches and the stored state is not
        IN_USE at the moment of the write.

        Returns:
            Number of modified devices (0 or 1)
        """
        pass
