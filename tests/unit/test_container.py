"""
Unit tests for the DI container and device provider wiring (no real DB).
"""
from unittest.mock import MagicMock, patch

import pytest

from device_crud.application.services.device_aggregator import DeviceAggregator
from device_crud.application.services.device_id_generator import DeviceIdGenerator
from device_crud.application.services.device_validator import DeviceValidator
from device_crud.application.use_cases.device import CreateDeviceUseCase, GetDeviceUseCase
from device_crud.di.base_container import BaseContainer
from device_crud.di.container import DIContainer
from device_crud.di.providers.device_provider import DeviceProvider
from device_crud.domain.repositories.device_repository import DeviceRepository
from device_crud.infrastructure.db.mongo_device_repository import MongoDeviceRepository


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_is_shared(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance
        assert container.get("thing") is container.get("thing")

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory(list, lambda: [])
        assert container.get(list) == []
        assert container.get(list) is not container.get(list)

    def test_missing_dependency_raises(self):
        container = BaseContainer()
        with pytest.raises(ValueError, match="No dependency registered for DeviceRepository"):
            container.get(DeviceRepository)

    def test_is_registered(self):
        container = BaseContainer()
        assert container.is_registered("database") is False
        container.register_singleton("database", MagicMock())
        assert container.is_registered("database") is True


class TestDeviceProvider:
    """Tests for DeviceProvider registrations"""

    @pytest.fixture
    def container(self, mock_settings, fake_repo):
        container = BaseContainer()
        container.register_singleton(DeviceRepository, fake_repo)
        DeviceProvider.register(container)
        return container

    def test_generator_uses_configured_environment(self, container):
        generator = container.get(DeviceIdGenerator)
        assert generator.environment_tag == "TEST"
        assert generator.generate_id("Galaxy S24", "Samsung").startswith("TEST-GALA-SAMS-")

    def test_services_are_singletons(self, container):
        assert container.get(DeviceValidator) is container.get(DeviceValidator)
        assert container.get(DeviceIdGenerator) is container.get(DeviceIdGenerator)

    def test_use_cases_share_repository(self, container, fake_repo):
        create_use_case = container.get(CreateDeviceUseCase)
        get_use_case = container.get(GetDeviceUseCase)
        assert create_use_case.device_repository is fake_repo
        assert get_use_case.device_repository is fake_repo
        assert container.get(CreateDeviceUseCase) is not create_use_case

    def test_aggregator_resolves(self, container):
        assert isinstance(container.get(DeviceAggregator), DeviceAggregator)


class TestDIContainer:
    """Tests for the composed container"""

    def test_wires_mongo_repository_to_device_collection(self, mock_settings):
        collection = MagicMock()
        with patch(
            "device_crud.di.providers.database_provider.get_database", return_value=MagicMock()
        ), patch(
            "device_crud.di.providers.database_provider.get_device_collection", return_value=collection
        ):
            container = DIContainer()

        repository = container.get(DeviceRepository)
        assert isinstance(repository, MongoDeviceRepository)
        assert repository.device_collection is collection
        assert isinstance(container.get(DeviceAggregator), DeviceAggregator)
