# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "device_crud")
        self.mongo_device_collection: Final[str] = os.getenv("MONGO_DEVICE_COLLECTION", "device")

        # Device ID Configuration
        # Environment tag prefixed to every generated device id (DEV, QA, PROD, ...)
        self.device_id_env: Final[str] = os.getenv("DEVICE_ID_ENV", "DEV")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # HTTP Configuration
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
