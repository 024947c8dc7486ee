# Standard library imports
from typing import Awaitable, Callable, Dict, List, Optional

# Local application imports
from ....domain.exceptions import DeviceError, ErrorKind
from ....domain.models.device import Device
from ....domain.models.device_state import DeviceState
from ....domain.repositories.device_repository import DeviceRepository

BRAND_PRESENT = 1
STATE_PRESENT = 2


class ListDevicesUseCase:
    """Use case for listing devices, optionally filtered by brand and/or state"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(
        self,
        brand: Optional[str] = None,
        state: Optional[str] = None,
    ) -> List[Device]:
        """
        List devices

        Args:
            brand: Only devices of this brand (blank means no filter)
            state: Only devices in this state, any case (blank means no filter)

        Returns:
            List of Device objects

        Raises:
            DeviceError: INVALID_ARGUMENT for an unknown state name. Writes report
                the same problem as INVALID_STATE; clients rely on both kinds.
        """
        brand = brand if brand and brand.strip() else None
        state = state if state and state.strip() else None

        device_state = DeviceState.from_string(state)
        if state is not None and device_state is DeviceState.INVALID:
            raise DeviceError(
                ErrorKind.INVALID_ARGUMENT,
                f"Invalid device state filter. Must be one of: {DeviceState.valid_names()}",
                details={"state": state},
            )

        queries: Dict[int, Callable[[], Awaitable[List[Device]]]] = {
            BRAND_PRESENT | STATE_PRESENT: lambda: self.device_repository.find_by_brand_and_state(brand, device_state),
            BRAND_PRESENT: lambda: self.device_repository.find_by_brand(brand),
            STATE_PRESENT: lambda: self.device_repository.find_by_state(device_state),
            0: self.device_repository.find_all,
        }
        filter_code = (BRAND_PRESENT if brand is not None else 0) | (STATE_PRESENT if state is not None else 0)
        return await queries[filter_code]()
