# (c) Nelen & Schuurmans
import math
from collections.abc import Iterable

from ..base.domain import IdGenerator
from ..base.domain import InvalidAlphabet
from ..base.infrastructure import SecureByteSource
from ..base.infrastructure import system_byte_source

__all__ = ["AlphabetEncoder", "encode_random"]


# over-fetch factor so that one batch usually suffices despite rejected samples
STEP_FACTOR = 1.6


class AlphabetEncoder(IdGenerator):
    """Generates fixed-size random strings over an alphabet, without modulo bias.

    Each random byte is masked down to the smallest ``2**k - 1`` that covers
    all alphabet indices. Masked values that fall outside the alphabet are
    rejected instead of being wrapped around (``byte % len(alphabet)`` would
    favour the first symbols whenever the alphabet size does not divide 256).
    Bytes are fetched in batches of ``step`` to keep the number of calls to
    the byte source low.

    A size of zero or less gives an empty string. A single-symbol alphabet
    gives that symbol repeated ``size`` times.

    Alphabets of more than 256 symbols draw each sample from several bytes
    (big endian), so that every index stays reachable.
    """

    def __init__(
        self,
        alphabet: str,
        size: int,
        byte_source: SecureByteSource | None = None,
    ):
        if not alphabet:
            raise InvalidAlphabet("alphabet must contain at least one symbol")
        if len(set(alphabet)) != len(alphabet):
            raise InvalidAlphabet(f"alphabet contains duplicate symbols: {alphabet}")
        self.alphabet = alphabet
        self.size = size
        self.byte_source = byte_source or system_byte_source
        n = len(alphabet)
        if n > 1:
            # equals (2 << floor(log2(n - 1))) - 1
            self.mask = (1 << (n - 1).bit_length()) - 1
            self.step = max(math.ceil(STEP_FACTOR * self.mask * size / n), 1)
        else:
            self.mask = 0
            self.step = 1
        self.width = max((self.mask.bit_length() + 7) // 8, 1)

    def _samples(self) -> Iterable[int]:
        data = self.byte_source.next_bytes(self.step * self.width)
        if self.width == 1:
            return data
        return (
            int.from_bytes(data[i : i + self.width], "big")
            for i in range(0, len(data), self.width)
        )

    def generate(self) -> str:
        if self.size <= 0:
            return ""
        n = len(self.alphabet)
        if n == 1:
            return self.alphabet * self.size
        result: list[str] = []
        while True:
            for sample in self._samples():
                index = sample & self.mask
                if index >= n:
                    continue
                result.append(self.alphabet[index])
                if len(result) == self.size:
                    return "".join(result)


def encode_random(
    alphabet: str, size: int, byte_source: SecureByteSource | None = None
) -> str:
    """Return ``size`` symbols drawn uniformly and independently from ``alphabet``."""
    return AlphabetEncoder(alphabet, size, byte_source).generate()
