"""
Shared pytest fixtures for device-crud tests.
"""
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

from device_crud.domain.models.device import Device
from device_crud.domain.models.device_state import DeviceState
from device_crud.domain.repositories.device_repository import DeviceRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_device_db",
        "DEVICE_ID_ENV": "TEST",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_device_collection = "device"
    mock.device_id_env = "TEST"
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("device_crud.core.config.get_settings", return_value=mock), patch(
        "device_crud.di.providers.device_provider.get_settings", return_value=mock
    ), patch("device_crud.infrastructure.db.mongo_connection.get_settings", return_value=mock):
        yield mock


def make_device(
    device_id: str = "TEST-GALA-SAMS-ABC123",
    name: str = "Galaxy S24",
    brand: str = "Samsung",
    state: DeviceState = DeviceState.AVAILABLE,
    creation_time: Optional[datetime] = None,
) -> Device:
    return Device(
        id=device_id,
        name=name,
        brand=brand,
        state=state,
        creation_time=creation_time or datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


class FakeDeviceRepository(DeviceRepository):
    """In-memory DeviceRepository that records saves and deletes."""

    def __init__(self, devices: Optional[List[Device]] = None) -> None:
        self._devices: Dict[str, Device] = {device.id: device for device in devices or []}
        self.saved: List[Device] = []
        self.deleted: List[str] = []

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        return self._devices.get(device_id)

    async def exists_by_id(self, device_id: str) -> bool:
        return device_id in self._devices

    async def find_all(self) -> List[Device]:
        return list(self._devices.values())

    async def find_by_brand(self, brand: str) -> List[Device]:
        return [d for d in self._devices.values() if d.brand == brand]

    async def find_by_state(self, state: DeviceState) -> List[Device]:
        return [d for d in self._devices.values() if d.state is state]

    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> List[Device]:
        return [d for d in self._devices.values() if d.brand == brand and d.state is state]

    async def save(self, device: Device) -> Device:
        self._devices[device.id] = device
        self.saved.append(device)
        return device

    async def delete_by_id(self, device_id: str) -> None:
        self._devices.pop(device_id, None)
        self.deleted.append(device_id)

    async def set_brand_if_not_in_use(self, device_id: str, brand: str) -> int:
        device = self._devices.get(device_id)
        if device is None or device.state is DeviceState.IN_USE or device.brand == brand:
            return 0
        device.brand = brand
        return 1

    def seed(self, *devices: Device) -> None:
        """Store devices without recording them as saves"""
        for device in devices:
            self._devices[device.id] = device

    def set_state(self, device_id: str, state: DeviceState) -> None:
        """Change state directly, bypassing the use cases"""
        self._devices[device_id].state = state


@pytest.fixture
def device_factory():
    return make_device


@pytest.fixture
def fake_repo():
    return FakeDeviceRepository()
