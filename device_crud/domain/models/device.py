# Standard library imports
from dataclasses import dataclass
from datetime import datetime

# Local application imports
from .device_state import DeviceState


@dataclass
class Device:
    """
    Pure domain model for Device entity.

    The id is generated from name and brand at creation time and never changes
    afterwards, and neither does creation_time. A device whose state is IN_USE
    may not be updated or deleted.
    """
    id: str
    name: str
    brand: str
    state: DeviceState
    creation_time: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id or not self.id.strip():
            raise ValueError("Device ID is required")
        if not self.name or not self.name.strip():
            raise ValueError("Device name is required")
        if not self.brand or not self.brand.strip():
            raise ValueError("Device brand is required")
        if not isinstance(self.state, DeviceState) or self.state is DeviceState.INVALID:
            raise ValueError(f"Device state must be one of: {DeviceState.valid_names()}")

    @property
    def in_use(self) -> bool:
        return self.state is DeviceState.IN_USE
