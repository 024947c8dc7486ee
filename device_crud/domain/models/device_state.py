# Standard library imports
from enum import Enum
from typing import Optional


class DeviceState(str, Enum):
    """
    Lifecycle state of a device.

    AVAILABLE, IN_USE and INACTIVE are the only states that may be persisted.
    INVALID is what parsing an unrecognized string yields; it never reaches storage.
    """
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    INACTIVE = "INACTIVE"
    INVALID = "INVALID"

    @classmethod
    def is_valid_state(cls, state: Optional[str]) -> bool:
        """True when state names one of the persistable states (case-insensitive)"""
        return cls.from_string(state) is not cls.INVALID

    @classmethod
    def from_string(cls, state: Optional[str]) -> "DeviceState":
        """
        Parse a state name, ignoring case.

        Returns:
            The matching DeviceState, or INVALID for None, blank or unknown names
        """
        if not state:
            return cls.INVALID
        normalized = state.strip().upper()
        for device_state in cls:
            if device_state.value == normalized:
                return device_state
        return cls.INVALID

    @classmethod
    def valid_names(cls) -> str:
        """Comma separated list of persistable state names, for error messages"""
        return ", ".join(state.value for state in cls if state is not cls.INVALID)
