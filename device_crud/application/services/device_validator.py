"""Request validation and lifecycle guards for device mutations."""
import logging
from datetime import datetime
from typing import Optional

from ...domain.exceptions import DeviceError, ErrorKind
from ...domain.models.device import Device
from ...domain.models.device_state import DeviceState
from ...utils.datetime_utils import is_in_future
from ..dto.device_dto import DeviceCreateRequest, DeviceUpdateRequest

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class DeviceValidator:
    """
    Stateless checks run before a device is written or removed.

    Field checks raise INVALID_CREATION / INVALID_STATE / INVALID_ARGUMENT,
    the in-use guards raise INVALID_UPDATE / INVALID_DELETION.
    """

    def validate_create_request(self, request: DeviceCreateRequest) -> None:
        self.validate_name(request.name)
        self.validate_brand(request.brand)
        self.validate_state(request.state)
        self.validate_creation_time(request.creation_time)

    def validate_update_request(self, request: DeviceUpdateRequest, existing_device: Device) -> None:
        self.validate_name(request.name)
        self.validate_brand(request.brand)
        self.validate_state(request.state)
        # Rejected even when the request carries the stored values unchanged
        if existing_device.in_use:
            logger.error(f"Cannot update device {existing_device.id}: device is in use")
            raise DeviceError(
                ErrorKind.INVALID_UPDATE,
                "Cannot update name or brand of a device that is in use",
                details={"device_id": existing_device.id},
            )

    def ensure_deletable(self, device: Device) -> None:
        if device.in_use:
            logger.error(f"Cannot delete device {device.id}: device is in use")
            raise DeviceError(
                ErrorKind.INVALID_DELETION,
                "Cannot delete device that is in use",
                details={"device_id": device.id},
            )

    def validate_id(self, device_id: Optional[str]) -> None:
        if _is_blank(device_id):
            logger.error("Device id is empty")
            raise DeviceError(ErrorKind.INVALID_ID, "Device ID must not be blank.")

    def validate_name(self, name: Optional[str]) -> None:
        if _is_blank(name):
            logger.error("Name cannot be empty")
            raise DeviceError(
                ErrorKind.INVALID_CREATION,
                "Device name cannot be empty. Please enter a valid name.",
            )

    def validate_brand(self, brand: Optional[str]) -> None:
        if _is_blank(brand):
            logger.error("Brand cannot be empty")
            raise DeviceError(
                ErrorKind.INVALID_CREATION,
                "Device brand cannot be empty. Please enter a valid brand.",
            )

    def validate_state(self, state: Optional[str]) -> None:
        if _is_blank(state) or not DeviceState.is_valid_state(state):
            message = f"Invalid or blank device state. Must be one of: {DeviceState.valid_names()}"
            logger.error(message)
            raise DeviceError(ErrorKind.INVALID_STATE, message, details={"state": state})

    def validate_creation_time(self, creation_time: Optional[datetime]) -> None:
        # Missing creation time is filled in with the current time by the use case
        if creation_time is not None and is_in_future(creation_time):
            logger.error("Creation time cannot be in the future")
            raise DeviceError(ErrorKind.INVALID_ARGUMENT, "Creation time cannot be in the future")
