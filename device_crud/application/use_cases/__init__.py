from .device import (
    CreateDeviceUseCase,
    UpdateDeviceUseCase,
    UpdateDeviceBrandUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    DeleteDeviceUseCase,
)

__all__ = [
    "CreateDeviceUseCase",
    "UpdateDeviceUseCase",
    "UpdateDeviceBrandUseCase",
    "GetDeviceUseCase",
    "ListDevicesUseCase",
    "DeleteDeviceUseCase",
]
