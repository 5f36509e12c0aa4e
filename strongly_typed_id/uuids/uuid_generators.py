# (c) Nelen & Schuurmans
import uuid

import uuid6

from ..base.domain import IdGenerator
from ..base.infrastructure import SecureByteSource
from ..base.infrastructure import system_byte_source

__all__ = [
    "UuidV1Generator",
    "UuidV3Generator",
    "UuidV4Generator",
    "UuidV5Generator",
    "UuidV6Generator",
    "UuidV7Generator",
    "UuidV8Generator",
    "GuidGenerator",
]


class UuidV1Generator(IdGenerator):
    """Time-based; embeds the host's MAC address."""

    def generate(self) -> str:
        return str(uuid.uuid1())


class _NameBasedGenerator(IdGenerator):
    def __init__(self, namespace: uuid.UUID | str = uuid.NAMESPACE_OID, name=None):
        if isinstance(namespace, str):
            namespace = uuid.UUID(namespace)
        self.namespace = namespace
        self.name = name

    def _name(self) -> str:
        # without a fixed name every call hashes a fresh unique name
        return self.name if self.name is not None else uuid.uuid4().hex


class UuidV3Generator(_NameBasedGenerator):
    """Name-based (MD5). Deterministic when a name is given."""

    def generate(self) -> str:
        return str(uuid.uuid3(self.namespace, self._name()))


class UuidV5Generator(_NameBasedGenerator):
    """Name-based (SHA-1). Deterministic when a name is given."""

    def generate(self) -> str:
        return str(uuid.uuid5(self.namespace, self._name()))


class UuidV4Generator(IdGenerator):
    def generate(self) -> str:
        return str(uuid.uuid4())


class UuidV6Generator(IdGenerator):
    """Time-ordered, field-compatible with v1."""

    def generate(self) -> str:
        return str(uuid6.uuid6())


class UuidV7Generator(IdGenerator):
    """Time-ordered on a unix timestamp; a good default for primary keys."""

    def generate(self) -> str:
        return str(uuid6.uuid7())


class UuidV8Generator(IdGenerator):
    """Custom-format UUID filled with random bytes."""

    def __init__(self, byte_source: SecureByteSource | None = None):
        self.byte_source = byte_source or system_byte_source

    def generate(self) -> str:
        value = int.from_bytes(self.byte_source.next_bytes(16), "big")
        return str(uuid6.UUID(int=value, version=8))


class GuidGenerator(IdGenerator):
    """UUID v4 in the uppercase notation used by Windows/.NET."""

    def generate(self) -> str:
        return str(uuid.uuid4()).upper()
