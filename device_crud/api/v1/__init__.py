from .device_controller import router as device_router
from .error_handlers import register_error_handlers


__all__ = ["device_router", "register_error_handlers"]
