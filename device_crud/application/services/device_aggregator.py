"""
Device Aggregator
=================

Application service that exposes every device operation in one place.
Each operation is carried out by its own use case; the aggregator only
routes calls, so the API layer depends on a single object.
"""
from typing import List, Optional

from ...domain.models.device import Device
from ..dto.device_dto import DeviceCreateRequest, DeviceUpdateRequest
from ..use_cases.device import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceBrandUseCase,
    UpdateDeviceUseCase,
)


class DeviceAggregator:
    """
    Entry point for device CRUD.

    All methods raise DeviceError on failure; nothing is retried.
    """

    def __init__(
        self,
        create_use_case: CreateDeviceUseCase,
        update_use_case: UpdateDeviceUseCase,
        update_brand_use_case: UpdateDeviceBrandUseCase,
        get_use_case: GetDeviceUseCase,
        list_use_case: ListDevicesUseCase,
        delete_use_case: DeleteDeviceUseCase,
    ):
        self._create = create_use_case
        self._update = update_use_case
        self._update_brand = update_brand_use_case
        self._get = get_use_case
        self._list = list_use_case
        self._delete = delete_use_case

    async def create_device(self, request: DeviceCreateRequest) -> Device:
        return await self._create.execute(request)

    async def update_device(self, device_id: str, request: DeviceUpdateRequest) -> Device:
        return await self._update.execute(device_id, request)

    async def update_brand(self, device_id: str, new_brand: str) -> str:
        return await self._update_brand.execute(device_id, new_brand)

    async def get_device(self, device_id: str) -> Device:
        return await self._get.execute(device_id)

    async def list_devices(
        self,
        brand: Optional[str] = None,
        state: Optional[str] = None,
    ) -> List[Device]:
        """
        List devices filtered by brand and/or state.

        Args:
            brand: Brand filter, None or blank for any brand
            state: State name filter, None or blank for any state
        """
        return await self._list.execute(brand=brand, state=state)

    async def delete_device(self, device_id: str) -> str:
        return await self._delete.execute(device_id)
