from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.device_repository import DeviceRepository
from ...application.services.device_id_generator import DeviceIdGenerator
from ...application.services.device_validator import DeviceValidator
from ...application.services.device_aggregator import DeviceAggregator
from ...application.use_cases.device.create_device import CreateDeviceUseCase
from ...application.use_cases.device.update_device import UpdateDeviceUseCase
from ...application.use_cases.device.update_device_brand import UpdateDeviceBrandUseCase
from ...application.use_cases.device.get_device import GetDeviceUseCase
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device provider - registers device services, use cases and the aggregator"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device dependencies.
        The generator and validator are stateless singletons; use cases are
        created on-demand via factories.
        """
        container.register_singleton(
            DeviceIdGenerator,
            DeviceIdGenerator(environment_tag=get_settings().device_id_env),
        )
        container.register_singleton(DeviceValidator, DeviceValidator())

        container.register_factory(
            CreateDeviceUseCase,
            lambda: CreateDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                id_generator=container.get(DeviceIdGenerator),
                validator=container.get(DeviceValidator),
            )
        )

        container.register_factory(
            UpdateDeviceUseCase,
            lambda: UpdateDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                validator=container.get(DeviceValidator),
            )
        )

        container.register_factory(
            UpdateDeviceBrandUseCase,
            lambda: UpdateDeviceBrandUseCase(
                device_repository=container.get(DeviceRepository),
                validator=container.get(DeviceValidator),
            )
        )

        container.register_factory(
            GetDeviceUseCase,
            lambda: GetDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                validator=container.get(DeviceValidator),
            )
        )

        container.register_factory(
            ListDevicesUseCase,
            lambda: ListDevicesUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )

        container.register_factory(
            DeleteDeviceUseCase,
            lambda: DeleteDeviceUseCase(
                device_repository=container.get(DeviceRepository),
                validator=container.get(DeviceValidator),
            )
        )

        container.register_factory(
            DeviceAggregator,
            lambda: DeviceAggregator(
                create_use_case=container.get(CreateDeviceUseCase),
                update_use_case=container.get(UpdateDeviceUseCase),
                update_brand_use_case=container.get(UpdateDeviceBrandUseCase),
                get_use_case=container.get(GetDeviceUseCase),
                list_use_case=container.get(ListDevicesUseCase),
                delete_use_case=container.get(DeleteDeviceUseCase),
            )
        )
