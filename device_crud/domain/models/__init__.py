from .device import Device
from .device_state import DeviceState

__all__ = ["Device", "DeviceState"]
