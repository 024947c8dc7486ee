# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import DeviceError, ErrorKind
from ....domain.models.device import Device
from ....domain.models.device_state import DeviceState
from ....domain.repositories.device_repository import DeviceRepository
from ....utils.datetime_utils import ensure_utc, utc_now
from ...dto.device_dto import DeviceCreateRequest
from ...services.device_id_generator import DeviceIdGenerator
from ...services.device_validator import DeviceValidator

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for creating a new device"""

    def __init__(
        self,
        device_repository: DeviceRepository,
        id_generator: DeviceIdGenerator,
        validator: DeviceValidator,
    ) -> None:
        self.device_repository = device_repository
        self.id_generator = id_generator
        self.validator = validator

    async def execute(self, request: DeviceCreateRequest) -> Device:
        """
        Create a new device

        Args:
            request: Device creation request

        Returns:
            The persisted Device, carrying its generated ID

        Raises:
            DeviceError: If validation fails or a device with the same
                name and brand already exists
        """
        self.validator.validate_create_request(request)

        device_id = self.id_generator.generate_id(request.name, request.brand)

        # Same name and brand always hash to the same ID
        if await self.device_repository.exists_by_id(device_id):
            logger.warning(f"Device {device_id} already exists")
            raise DeviceError(
                ErrorKind.DUPLICATE_DEVICE,
                "Device with same name and brand already exists.",
                details={"device_id": device_id},
            )

        creation_time = ensure_utc(request.creation_time) if request.creation_time else utc_now()
        new_device = Device(
            id=device_id,
            name=request.name,
            brand=request.brand,
            state=DeviceState.from_string(request.state),
            creation_time=creation_time,
        )

        saved_device = await self.device_repository.save(new_device)
        logger.info(f"Successfully created device {saved_device.id}")
        return saved_device
