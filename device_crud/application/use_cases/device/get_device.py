# Local application imports
from ....domain.exceptions import DeviceError, ErrorKind
from ....domain.models.device import Device
from ....domain.repositories.device_repository import DeviceRepository
from ...services.device_validator import DeviceValidator


async def find_device_or_raise(device_repository: DeviceRepository, device_id: str) -> Device:
    """Load a device, raising NOT_FOUND when no device has this ID"""
    device = await device_repository.find_by_id(device_id)
    if device is None:
        raise DeviceError(
            ErrorKind.NOT_FOUND,
            f"Device not found with id: {device_id}",
            details={"device_id": device_id},
        )
    return device


class GetDeviceUseCase:
    """Use case for getting a device by ID"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        validator: DeviceValidator,
    ) -> None:
        self.device_repository = device_repository
        self.validator = validator

    async def execute(self, device_id: str) -> Device:
        """
        Get a device by ID

        Args:
            device_id: ID of the device

        Returns:
            The stored Device

        Raises:
            DeviceError: INVALID_ID for a blank ID, NOT_FOUND if no such device
        """
        self.validator.validate_id(device_id)
        return await find_device_or_raise(self.device_repository, device_id)
