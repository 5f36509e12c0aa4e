# (c) Nelen & Schuurmans
import logging
import secrets
from abc import ABC
from abc import abstractmethod

from ..domain import EntropyUnavailable

__all__ = ["SecureByteSource", "SystemByteSource", "system_byte_source"]

logger = logging.getLogger(__name__)


class SecureByteSource(ABC):
    @abstractmethod
    def next_bytes(self, count: int) -> bytes:
        """Return ``count`` uniformly random bytes or raise EntropyUnavailable."""


class SystemByteSource(SecureByteSource):
    """Reads from the operating system CSPRNG. Stateless and thread-safe."""

    def next_bytes(self, count: int) -> bytes:
        try:
            return secrets.token_bytes(count)
        except (OSError, NotImplementedError) as e:
            logger.error("could not read %d bytes from the system CSPRNG", count)
            raise EntropyUnavailable(count) from e


system_byte_source = SystemByteSource()
