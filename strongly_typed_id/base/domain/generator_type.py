# (c) Nelen & Schuurmans

import re
from enum import Enum

__all__ = ["GeneratorType", "ID_FORMATS", "CASE_INSENSITIVE"]


class GeneratorType(str, Enum):
    UUID_V1 = "uuid_v1"
    UUID_V3 = "uuid_v3"
    UUID_V4 = "uuid_v4"
    UUID_V5 = "uuid_v5"
    UUID_V6 = "uuid_v6"
    UUID_V7 = "uuid_v7"
    UUID_V8 = "uuid_v8"
    ULID = "ulid"
    SQIDS = "sqids"
    HASHIDS = "hashids"
    NANOID = "nanoid"
    BASE58 = "base58"
    GUID = "guid"
    RANDOM_STRING = "random_string"
    RANDOM_BYTES = "random_bytes"
    PREFIXED = "prefixed"


_UUID = re.compile(
    "^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
# Crockford base32, no I, L, O, U
_ULID = re.compile("^[0-7][0-9a-hjkmnp-tv-z]{25}$", re.IGNORECASE)
_ALPHANUMERIC = re.compile("^[A-Za-z0-9]+$")

ID_FORMATS: dict[GeneratorType, re.Pattern[str]] = {
    GeneratorType.UUID_V1: _UUID,
    GeneratorType.UUID_V3: _UUID,
    GeneratorType.UUID_V4: _UUID,
    GeneratorType.UUID_V5: _UUID,
    GeneratorType.UUID_V6: _UUID,
    GeneratorType.UUID_V7: _UUID,
    GeneratorType.UUID_V8: _UUID,
    GeneratorType.GUID: _UUID,
    GeneratorType.ULID: _ULID,
    GeneratorType.SQIDS: _ALPHANUMERIC,
    GeneratorType.HASHIDS: _ALPHANUMERIC,
    GeneratorType.NANOID: re.compile("^[A-Za-z0-9_-]+$"),
    GeneratorType.BASE58: re.compile("^[1-9A-HJ-NP-Za-km-z]+$"),
    GeneratorType.RANDOM_STRING: _ALPHANUMERIC,
    GeneratorType.RANDOM_BYTES: re.compile("^(?:[0-9a-f]{2})+$"),
    GeneratorType.PREFIXED: re.compile("^[A-Za-z0-9]*_[A-Za-z0-9_-]+$"),
}

# formats for which from_string() normalizes to lowercase
CASE_INSENSITIVE = frozenset(
    k for k, v in ID_FORMATS.items() if v.flags & re.IGNORECASE
)
