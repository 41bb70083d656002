"""ShortGuid generator."""

import logging
import uuid

from shortguid.short_guid import ShortGuid

logger = logging.getLogger(__name__)

_FACTORIES = {
    1: uuid.uuid1,
    4: uuid.uuid4,
}


class ShortGuidGenerator:
    """Creates ShortGuids for new UUIDs from the standard library generators."""

    def __init__(self, version: int = 4):
        """Initialize generator.

        Args:
            version: UUID version to generate (1 = time-based, 4 = random)

        Raises:
            ValueError: If version is not supported
        """
        if version not in _FACTORIES:
            raise ValueError(
                f"Unsupported UUID version: {version}. "
                f"Available: {', '.join(str(v) for v in _FACTORIES)}"
            )
        self.version = version
        self._factory = _FACTORIES[version]

    def generate(self) -> ShortGuid:
        """Generate a ShortGuid.

        Returns:
            New ShortGuid
        """
        return ShortGuid.from_uuid(self._factory())

    def generate_batch(self, count: int) -> list[ShortGuid]:
        """Generate batch of ShortGuids.

        Args:
            count: Number of ShortGuids to generate

        Returns:
            List of generated ShortGuids
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")

        logger.debug(f"Generating {count} version {self.version} ShortGuids")
        return [self.generate() for _ in range(count)]
