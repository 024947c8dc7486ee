"""Deterministic device id generation."""
import hashlib
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")

SEGMENT_LENGTH = 4
HASH_LENGTH = 6
UNKNOWN_SEGMENT = "UNK"


class DeviceIdGenerator:
    """
    Builds the primary key of a device from its name and brand.

    The id reads ``{env}-{NAME}-{BRAND}-{HASH}``: the environment tag, up to
    four alphanumeric characters of name and brand, and the first six hex
    characters of sha256("name:brand"). The same name, brand and environment
    always yield the same id, which is how duplicates are detected.
    """

    def __init__(self, environment_tag: str) -> None:
        self.environment_tag = environment_tag

    def generate_id(self, name: Optional[str], brand: Optional[str]) -> str:
        short_name = self._shorten(name)
        short_brand = self._shorten(brand)
        hash_fragment = self._hash_fragment(name, brand)

        device_id = f"{self.environment_tag}-{short_name}-{short_brand}-{hash_fragment}"
        logger.debug(f"Generated device id {device_id}")
        return device_id

    @staticmethod
    def _shorten(value: Optional[str], max_length: int = SEGMENT_LENGTH) -> str:
        """Uppercase alphanumeric prefix of value, or UNK when value is missing"""
        if not value:
            return UNKNOWN_SEGMENT
        alphanumeric = _NON_ALPHANUMERIC.sub("", value).upper()
        return alphanumeric[:max_length]

    @staticmethod
    def _hash_fragment(name: Optional[str], brand: Optional[str]) -> str:
        # Missing values hash as "null" so ids stay stable across deployments
        to_hash = f"{_as_text(name)}:{_as_text(brand)}"
        digest = hashlib.sha256(to_hash.encode("utf-8")).hexdigest()
        return digest[:HASH_LENGTH].upper()


def _as_text(value: Optional[str]) -> str:
    return "null" if value is None else value
