from .create_device import CreateDeviceUseCase
from .update_device import UpdateDeviceUseCase
from .update_device_brand import UpdateDeviceBrandUseCase
from .get_device import GetDeviceUseCase
from .list_devices import ListDevicesUseCase
from .delete_device import DeleteDeviceUseCase

__all__ = [
    "CreateDeviceUseCase",
    "UpdateDeviceUseCase",
    "UpdateDeviceBrandUseCase",
    "GetDeviceUseCase",
    "ListDevicesUseCase",
    "DeleteDeviceUseCase",
]
