from .device_dto import DeviceCreateRequest, DeviceUpdateRequest, DeviceResponse

__all__ = [
    "DeviceCreateRequest",
    "DeviceUpdateRequest",
    "DeviceResponse",
]
