from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from ...domain.models.device import Device


class DeviceCreateRequest(BaseModel):
    """DTO for device creation request"""
    # Left optional so blank/missing values reach DeviceValidator
    name: Optional[str] = None
    brand: Optional[str] = None
    state: Optional[str] = None  # AVAILABLE, IN_USE or INACTIVE (any case)
    creation_time: Optional[datetime] = None  # Defaults to now when omitted


class DeviceUpdateRequest(BaseModel):
    """DTO for full device update request"""
    name: Optional[str] = None
    brand: Optional[str] = None
    state: Optional[str] = None


class DeviceResponse(BaseModel):
    """DTO for device response"""
    id: str
    name: str
    brand: str
    state: str
    creation_time: datetime

    @classmethod
    def from_device(cls, device: Device) -> "DeviceResponse":
        return cls(
            id=device.id,
            name=device.name,
            brand=device.brand,
            state=device.state.value,
            creation_time=device.creation_time,
        )
