# (c) Nelen & Schuurmans

from typing import Annotated

from pydantic import StringConstraints

from ..base.domain import GeneratorType
from ..base.domain import ID_FORMATS
from ..base.infrastructure import SecureByteSource
from .alphabet_encoder import AlphabetEncoder
from .alphabet_encoder import encode_random

__all__ = [
    "NanoId",
    "Base58Id",
    "NANOID_ALPHABET",
    "BASE58",
    "NanoIdGenerator",
    "Base58Generator",
    "random_nanoid",
]


NanoId = Annotated[
    str, StringConstraints(pattern=ID_FORMATS[GeneratorType.NANOID].pattern)
]
Base58Id = Annotated[
    str, StringConstraints(pattern=ID_FORMATS[GeneratorType.BASE58].pattern)
]

# URL-safe, 64 symbols
NANOID_ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Ref. https://digitalbazaar.github.io/base58-spec/
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def random_nanoid(
    size: int, alphabet: str = BASE58, byte_source: SecureByteSource | None = None
) -> NanoId:
    """Generate a random string (NanoID) based on the base58 alphabet.

    Recommended sizes to have <1% collision probability:

    - 6 characters if the expected number of records is below 27K
    - 8 characters if the expected number of records is below 1M
    - 10 characters if the expected number of records is below 93M
    - 12 characters if the expected number of records is below 5B

    Ref. https://zelark.github.io/nano-id-cc/
    """
    return encode_random(alphabet, size, byte_source)


class NanoIdGenerator(AlphabetEncoder):
    """URL-friendly random ids. The default size of 21 gives about the same
    collision probability as UUID v4.
    """

    def __init__(
        self,
        size: int = 21,
        alphabet: str = NANOID_ALPHABET,
        byte_source: SecureByteSource | None = None,
    ):
        super().__init__(alphabet, size, byte_source)


class Base58Generator(AlphabetEncoder):
    """Random ids without the visually ambiguous 0, O, I and l."""

    def __init__(
        self,
        size: int = 21,
        alphabet: str = BASE58,
        byte_source: SecureByteSource | None = None,
    ):
        super().__init__(alphabet, size, byte_source)
