from .device_id_generator import DeviceIdGenerator
from .device_validator import DeviceValidator
from .device_aggregator import DeviceAggregator

__all__ = ["DeviceIdGenerator", "DeviceValidator", "DeviceAggregator"]
