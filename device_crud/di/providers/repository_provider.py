from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        device_collection = container.get("device_collection")

        # Domain interface -> Infrastructure implementation
        container.register_singleton(
            DeviceRepository,
            MongoDeviceRepository(device_collection=device_collection)
        )
