# (c) Nelen & Schuurmans
import secrets

from hashids import Hashids
from sqids import Sqids

from ..base.domain import IdGenerator

__all__ = ["HashidsGenerator", "SqidsGenerator", "HASHIDS_ALPHABET"]


HASHIDS_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"

# largest signed 64 bit integer
MAX_NUMBER = 2**63 - 1


def _random_number() -> int:
    # uniform in [1, MAX_NUMBER]
    return secrets.randbelow(MAX_NUMBER) + 1


class HashidsGenerator(IdGenerator):
    """Short ids obtained by encoding a random number with Hashids."""

    def __init__(
        self, salt: str = "", min_length: int = 8, alphabet: str | None = None
    ):
        self.hashids = Hashids(
            salt=salt, min_length=min_length, alphabet=alphabet or HASHIDS_ALPHABET
        )

    def generate(self) -> str:
        return self.hashids.encode(_random_number())


class SqidsGenerator(IdGenerator):
    """Short ids obtained by encoding a random number with Sqids."""

    def __init__(self, alphabet: str | None = None, min_length: int = 8):
        if alphabet:
            self.sqids = Sqids(alphabet=alphabet, min_length=min_length)
        else:
            self.sqids = Sqids(min_length=min_length)

    def generate(self) -> str:
        return self.sqids.encode([_random_number()])
