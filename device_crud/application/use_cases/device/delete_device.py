# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ...services.device_validator import DeviceValidator
from .get_device import find_device_or_raise

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting a device that is not in use"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        validator: DeviceValidator,
    ) -> None:
        self.device_repository = device_repository
        self.validator = validator

    async def execute(self, device_id: str) -> str:
        """
        Delete a device

        Args:
            device_id: ID of the device to delete

        Returns:
            Confirmation message containing the ID

        Raises:
            DeviceError: INVALID_ID, NOT_FOUND, or INVALID_DELETION when the
                device is in use
        """
        self.validator.validate_id(device_id)
        existing_device = await find_device_or_raise(self.device_repository, device_id)
        self.validator.ensure_deletable(existing_device)

        await self.device_repository.delete_by_id(device_id)
        logger.info(f"Deleted device {device_id}")
        return f"Device with id: {device_id} deleted"
