# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import DeviceError, ErrorKind
from ....domain.repositories.device_repository import DeviceRepository
from ...services.device_validator import DeviceValidator

logger = logging.getLogger(__name__)


class UpdateDeviceBrandUseCase:
    """Use case for changing only the brand of a device that is not in use"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        validator: DeviceValidator,
    ) -> None:
        self.device_repository = device_repository
        self.validator = validator

    async def execute(self, device_id: str, new_brand: str) -> str:
        """
        Set the brand in one conditional write (ID matches and state is not IN_USE)

        Returns:
            Confirmation message with the ID and the new brand

        Raises:
            DeviceError: STORAGE_FAILURE when nothing was modified. The device is
                then either in use or missing; the write cannot tell which.
        """
        self.validator.validate_id(device_id)
        self.validator.validate_brand(new_brand)

        modified_count = await self.device_repository.set_brand_if_not_in_use(device_id, new_brand)
        if modified_count == 0:
            logger.error(f"Brand update for device {device_id} modified nothing")
            raise DeviceError(
                ErrorKind.STORAGE_FAILURE,
                "Failed to update brand",
                cause="Device is either in use or not found.",
                details={"device_id": device_id},
            )

        logger.info(f"Brand updated to {new_brand} for device {device_id}")
        return f'Brand of the device with id: {device_id} updated to "{new_brand}"'
