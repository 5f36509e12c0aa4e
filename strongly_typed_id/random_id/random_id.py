# (c) Nelen & Schuurmans
import string

from ..base.domain import IdGenerator
from ..base.infrastructure import SecureByteSource
from ..base.infrastructure import system_byte_source
from ..nanoid import AlphabetEncoder

__all__ = ["ALPHANUMERIC", "RandomStringGenerator", "RandomBytesGenerator"]


ALPHANUMERIC = string.ascii_letters + string.digits


class RandomStringGenerator(AlphabetEncoder):
    def __init__(self, length: int = 21, byte_source: SecureByteSource | None = None):
        super().__init__(ALPHANUMERIC, length, byte_source)


class RandomBytesGenerator(IdGenerator):
    """Lowercase hex encoding of ``num_bytes`` random bytes."""

    def __init__(
        self, num_bytes: int = 16, byte_source: SecureByteSource | None = None
    ):
        self.num_bytes = num_bytes
        self.byte_source = byte_source or system_byte_source

    def generate(self) -> str:
        return self.byte_source.next_bytes(self.num_bytes).hex()
