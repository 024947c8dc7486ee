# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Query, status

# Local application imports
from ...application.dto.device_dto import DeviceCreateRequest, DeviceUpdateRequest, DeviceResponse
from ...application.services.device_aggregator import DeviceAggregator
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Devices"])


def _get_aggregator() -> DeviceAggregator:
    return get_container().get(DeviceAggregator)


@router.post("/create", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(request: DeviceCreateRequest) -> DeviceResponse:
    """
    Create a device

    The device id is generated from name and brand; creating the same
    name and brand twice returns 409.
    """
    logger.debug(f"Received request to create device: {request}")
    device = await _get_aggregator().create_device(request)
    logger.info(f"Device created with ID: {device.id}")
    return DeviceResponse.from_device(device)


@router.put("/update/{device_id}", response_model=DeviceResponse)
async def update_device(device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
    """Replace name, brand and state of a device that is not in use"""
    logger.debug(f"Received request to update device {device_id}: {request}")
    device = await _get_aggregator().update_device(device_id, request)
    logger.info(f"Device with ID: {device.id} has been updated.")
    return DeviceResponse.from_device(device)


@router.put("/updateBrand/{device_id}/{new_brand}", response_model=str)
async def update_device_brand(device_id: str, new_brand: str) -> str:
    """Update brand of a device if it is not in use"""
    logger.debug(f"Received request to update brand for device id: {device_id} to new brand: {new_brand}")
    return await _get_aggregator().update_brand(device_id, new_brand)


@router.get("/fetch/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str) -> DeviceResponse:
    """Fetch a device by ID"""
    logger.debug(f"Start fetch device details for id : {device_id}")
    device = await _get_aggregator().get_device(device_id)
    logger.info(f"Fetched device with id: {device.id}")
    return DeviceResponse.from_device(device)


@router.get("/fetch", response_model=List[DeviceResponse])
async def list_devices(
    brand: Optional[str] = Query(default=None),
    state: Optional[str] = Query(default=None),
) -> List[DeviceResponse]:
    """Fetch all devices with optional brand and state filters"""
    logger.debug(f"Fetching devices with brand={brand!r} state={state!r}")
    devices = await _get_aggregator().list_devices(brand=brand, state=state)
    logger.info(f"Fetched {len(devices)} devices")
    return [DeviceResponse.from_device(device) for device in devices]


@router.delete("/{device_id}", response_model=str)
async def delete_device(device_id: str) -> str:
    """Delete a device by ID (devices in use cannot be deleted)"""
    logger.info(f"Received delete request for device id: {device_id}")
    return await _get_aggregator().delete_device(device_id)
