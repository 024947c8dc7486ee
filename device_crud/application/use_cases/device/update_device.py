# Standard library imports
import logging

# Local application imports
from ....domain.models.device import Device
from ....domain.models.device_state import DeviceState
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceUpdateRequest
from ...services.device_validator import DeviceValidator
from .get_device import find_device_or_raise

logger = logging.getLogger(__name__)


class UpdateDeviceUseCase:
    """Use case for replacing name, brand and state of a device"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        validator: DeviceValidator,
    ) -> None:
        self.device_repository = device_repository
        self.validator = validator

    async def execute(self, device_id: str, request: DeviceUpdateRequest) -> Device:
        """
        Update a device that is not in use

        Args:
            device_id: ID of the device to update
            request: New name, brand and state

        Returns:
            The updated Device (ID and creation time unchanged)

        Raises:
            DeviceError: INVALID_ID, NOT_FOUND, a validation kind, or
                INVALID_UPDATE when the stored device is in use
        """
        self.validator.validate_id(device_id)

        # Fetch-then-save: a concurrent switch to IN_USE between these two
        # calls is not detected. Only the brand-only update is atomic.
        existing_device = await find_device_or_raise(self.device_repository, device_id)
        self.validator.validate_update_request(request, existing_device)

        updated_device = Device(
            id=existing_device.id,
            name=request.name,
            brand=request.brand,
            state=DeviceState.from_string(request.state),
            creation_time=existing_device.creation_time,
        )

        saved_device = await self.device_repository.save(updated_device)
        logger.info(f"Successfully updated device {saved_device.id}")
        return saved_device
