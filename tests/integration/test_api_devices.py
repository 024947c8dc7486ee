"""
Integration tests for device API endpoints.
Uses TestClient with a mocked aggregator (no real DB).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from device_crud.application.dto.device_dto import DeviceCreateRequest, DeviceUpdateRequest
from device_crud.application.services.device_aggregator import DeviceAggregator
from device_crud.domain.exceptions import DeviceError, ErrorKind
from device_crud.domain.models.device import Device
from device_crud.domain.models.device_state import DeviceState

BASE_URL = "/private/v1/device"
DEVICE_ID = "TEST-GALA-SAMS-ABC123"


def _device(state: DeviceState = DeviceState.AVAILABLE, **overrides) -> Device:
    fields = {
        "id": DEVICE_ID,
        "name": "Galaxy S24",
        "brand": "Samsung",
        "state": state,
        "creation_time": datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Device(**fields)


@pytest.fixture
def mock_aggregator():
    return AsyncMock(spec=DeviceAggregator)


@pytest.fixture
def mock_container(mock_aggregator):
    container = MagicMock()
    container.get.side_effect = lambda cls: {DeviceAggregator: mock_aggregator}.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from device_crud.main import app

    with patch("device_crud.api.v1.device_controller.get_container", return_value=mock_container):
        with TestClient(app) as c:
            yield c


def _assert_error_body(response, status: int, error: str, message: str) -> None:
    assert response.status_code == status
    data = response.json()
    assert data["status"] == status
    assert data["error"] == error
    assert data["message"] == message
    assert data["timestamp"].endswith("Z")


class TestCreateDeviceAPI:
    """Tests for POST /private/v1/device/create"""

    def test_create_success(self, client, mock_aggregator):
        mock_aggregator.create_device.return_value = _device()

        response = client.post(
            f"{BASE_URL}/create",
            json={"name": "Galaxy S24", "brand": "Samsung", "state": "available"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == DEVICE_ID
        assert data["state"] == "AVAILABLE"
        assert data["creation_time"].startswith("2025-01-15T12:00:00")

        request = mock_aggregator.create_device.await_args.args[0]
        assert isinstance(request, DeviceCreateRequest)
        assert request.state == "available"
        assert request.creation_time is None

    def test_create_duplicate_returns_409(self, client, mock_aggregator):
        mock_aggregator.create_device.side_effect = DeviceError(
            ErrorKind.DUPLICATE_DEVICE, "Device with same name and brand already exists."
        )
        response = client.post(f"{BASE_URL}/create", json={"name": "Galaxy S24", "brand": "Samsung", "state": "AVAILABLE"})
        _assert_error_body(response, 409, "Conflict", "Device with same name and brand already exists.")

    def test_create_invalid_returns_400(self, client, mock_aggregator):
        mock_aggregator.create_device.side_effect = DeviceError(
            ErrorKind.INVALID_CREATION, "Device name must not be blank."
        )
        response = client.post(f"{BASE_URL}/create", json={"brand": "Samsung", "state": "AVAILABLE"})
        _assert_error_body(response, 400, "Bad Request", "Device name must not be blank.")

    def test_create_future_time_returns_400(self, client, mock_aggregator):
        mock_aggregator.create_device.side_effect = DeviceError(
            ErrorKind.INVALID_ARGUMENT, "Creation time cannot be in the future"
        )
        response = client.post(
            f"{BASE_URL}/create",
            json={"name": "Galaxy S24", "brand": "Samsung", "state": "AVAILABLE", "creation_time": "2999-01-01T00:00:00Z"},
        )
        assert response.status_code == 400


class TestUpdateDeviceAPI:
    """Tests for PUT /private/v1/device/update/{id} and /updateBrand/{id}/{brand}"""

    def test_update_success(self, client, mock_aggregator):
        mock_aggregator.update_device.return_value = _device(name="Galaxy S25", state=DeviceState.INACTIVE)

        response = client.put(
            f"{BASE_URL}/update/{DEVICE_ID}",
            json={"name": "Galaxy S25", "brand": "Samsung", "state": "INACTIVE"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Galaxy S25"
        assert response.json()["id"] == DEVICE_ID
        device_id, request = mock_aggregator.update_device.await_args.args
        assert device_id == DEVICE_ID
        assert isinstance(request, DeviceUpdateRequest)

    def test_update_in_use_returns_400(self, client, mock_aggregator):
        mock_aggregator.update_device.side_effect = DeviceError(
            ErrorKind.INVALID_UPDATE, "Cannot update name or brand of a device that is in use"
        )
        response = client.put(
            f"{BASE_URL}/update/{DEVICE_ID}",
            json={"name": "Galaxy S25", "brand": "Samsung", "state": "IN_USE"},
        )
        _assert_error_body(response, 400, "Bad Request", "Cannot update name or brand of a device that is in use")

    def test_update_missing_returns_404(self, client, mock_aggregator):
        mock_aggregator.update_device.side_effect = DeviceError(
            ErrorKind.NOT_FOUND, "Device not found with id: NOPE"
        )
        response = client.put(f"{BASE_URL}/update/NOPE", json={"name": "A", "brand": "B", "state": "AVAILABLE"})
        _assert_error_body(response, 404, "Not Found", "Device not found with id: NOPE")

    def test_update_brand_success(self, client, mock_aggregator):
        message = f'Brand of the device with id: {DEVICE_ID} updated to "Apple"'
        mock_aggregator.update_brand.return_value = message

        response = client.put(f"{BASE_URL}/updateBrand/{DEVICE_ID}/Apple")

        assert response.status_code == 200
        assert response.json() == message
        mock_aggregator.update_brand.assert_awaited_once_with(DEVICE_ID, "Apple")

    def test_update_brand_nothing_modified_returns_500(self, client, mock_aggregator):
        mock_aggregator.update_brand.side_effect = DeviceError(
            ErrorKind.STORAGE_FAILURE,
            "Failed to update brand",
            cause="Device is either in use or not found.",
        )
        response = client.put(f"{BASE_URL}/updateBrand/{DEVICE_ID}/Apple")
        _assert_error_body(
            response,
            500,
            "Internal Server Error",
            "Failed to update brand: Device is either in use or not found.",
        )


class TestFetchDeviceAPI:
    """Tests for GET /private/v1/device/fetch"""

    def test_fetch_by_id(self, client, mock_aggregator):
        mock_aggregator.get_device.return_value = _device()
        response = client.get(f"{BASE_URL}/fetch/{DEVICE_ID}")
        assert response.status_code == 200
        assert response.json()["brand"] == "Samsung"
        mock_aggregator.get_device.assert_awaited_once_with(DEVICE_ID)

    def test_fetch_by_id_not_found(self, client, mock_aggregator):
        mock_aggregator.get_device.side_effect = DeviceError(
            ErrorKind.NOT_FOUND, f"Device not found with id: {DEVICE_ID}"
        )
        response = client.get(f"{BASE_URL}/fetch/{DEVICE_ID}")
        _assert_error_body(response, 404, "Not Found", f"Device not found with id: {DEVICE_ID}")

    def test_fetch_all_without_filters(self, client, mock_aggregator):
        mock_aggregator.list_devices.return_value = [_device(), _device(id="TEST-XPS1-DELL-000001", brand="Dell")]

        response = client.get(f"{BASE_URL}/fetch")

        assert response.status_code == 200
        assert [d["brand"] for d in response.json()] == ["Samsung", "Dell"]
        mock_aggregator.list_devices.assert_awaited_once_with(brand=None, state=None)

    def test_fetch_with_filters(self, client, mock_aggregator):
        mock_aggregator.list_devices.return_value = []

        response = client.get(f"{BASE_URL}/fetch", params={"brand": "Dell", "state": "in_use"})

        assert response.status_code == 200
        assert response.json() == []
        mock_aggregator.list_devices.assert_awaited_once_with(brand="Dell", state="in_use")

    def test_fetch_with_invalid_state(self, client, mock_aggregator):
        mock_aggregator.list_devices.side_effect = DeviceError(
            ErrorKind.INVALID_ARGUMENT, "Invalid state: BROKEN"
        )
        response = client.get(f"{BASE_URL}/fetch", params={"state": "BROKEN"})
        _assert_error_body(response, 400, "Bad Request", "Invalid state: BROKEN")


class TestDeleteDeviceAPI:
    """Tests for DELETE /private/v1/device/{id}"""

    def test_delete_success(self, client, mock_aggregator):
        mock_aggregator.delete_device.return_value = f"Device with id: {DEVICE_ID} deleted"
        response = client.delete(f"{BASE_URL}/{DEVICE_ID}")
        assert response.status_code == 200
        assert response.json() == f"Device with id: {DEVICE_ID} deleted"

    def test_delete_in_use_returns_400(self, client, mock_aggregator):
        mock_aggregator.delete_device.side_effect = DeviceError(
            ErrorKind.INVALID_DELETION, "Cannot delete device that is in use"
        )
        response = client.delete(f"{BASE_URL}/{DEVICE_ID}")
        _assert_error_body(response, 400, "Bad Request", "Cannot delete device that is in use")


class TestErrorHandling:
    """Tests for storage and unexpected failures"""

    def test_storage_failure_returns_500_with_cause(self, client, mock_aggregator):
        mock_aggregator.get_device.side_effect = DeviceError(
            ErrorKind.STORAGE_FAILURE, "Failed to fetch device", cause="connection refused"
        )
        response = client.get(f"{BASE_URL}/fetch/{DEVICE_ID}")
        _assert_error_body(response, 500, "Internal Server Error", "Failed to fetch device: connection refused")

    def test_unexpected_error_returns_generic_500(self, mock_container, mock_aggregator):
        from device_crud.main import app

        mock_aggregator.get_device.side_effect = RuntimeError("boom")
        with patch("device_crud.api.v1.device_controller.get_container", return_value=mock_container):
            with TestClient(app, raise_server_exceptions=False) as c:
                response = c.get(f"{BASE_URL}/fetch/{DEVICE_ID}")

        _assert_error_body(response, 500, "Internal Server Error", "An unexpected error occurred.")


class TestHealthAPI:
    """Tests for GET /health"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
