import re
from collections import Counter
from unittest import mock

import pytest

from strongly_typed_id import AlphabetEncoder
from strongly_typed_id import BASE58
from strongly_typed_id import encode_random
from strongly_typed_id import EntropyUnavailable
from strongly_typed_id import InvalidAlphabet
from strongly_typed_id import NANOID_ALPHABET
from strongly_typed_id import SecureByteSource


@pytest.fixture
def byte_source():
    return mock.Mock(SecureByteSource)


@pytest.mark.parametrize(
    "alphabet,mask",
    [
        ("ab", 1),
        ("abc", 3),
        ("abcd", 3),
        ("abcde", 7),
        ("0123456789", 15),
        (BASE58, 63),
        (NANOID_ALPHABET, 63),
    ],
)
def test_mask(alphabet: str, mask: int):
    assert AlphabetEncoder(alphabet, 21).mask == mask


def test_mask_covers_all_indices():
    for n in range(2, 300):
        mask = AlphabetEncoder("".join(chr(0x100 + i) for i in range(n)), 1).mask
        assert mask >= n - 1
        assert mask < 2 * (n - 1)
        assert mask & (mask + 1) == 0  # 2**k - 1


@pytest.mark.parametrize("size", [0, -1, -100])
def test_step_at_least_one(size: int):
    assert AlphabetEncoder(NANOID_ALPHABET, size).step == 1


def test_step():
    # ceil(1.6 * 63 * 1 / 64)
    assert AlphabetEncoder(NANOID_ALPHABET, 1).step == 2


def test_masks_and_rejects(byte_source):
    # mask 3: 0 -> a, 3 -> reject, 1 -> b, 7 & 3 -> reject, 2 -> c, 4 & 3 -> a
    byte_source.next_bytes.return_value = bytes([0, 3, 1, 7, 2, 4, 5])

    assert encode_random("abc", 4, byte_source) == "abca"

    byte_source.next_bytes.assert_called_once_with(7)


def test_high_bits_are_masked(byte_source):
    byte_source.next_bytes.return_value = bytes([0b11111101, 0])

    assert encode_random("wxyz", 1, byte_source) == "x"


def test_fetches_new_batch_when_all_rejected(byte_source):
    byte_source.next_bytes.side_effect = [bytes([3, 255]), bytes([2, 0])]

    assert encode_random("abc", 1, byte_source) == "c"

    assert byte_source.next_bytes.call_args_list == [mock.call(2), mock.call(2)]


def test_entropy_unavailable_propagates(byte_source):
    byte_source.next_bytes.side_effect = EntropyUnavailable(7)

    with pytest.raises(EntropyUnavailable):
        encode_random("abc", 4, byte_source)


def test_large_alphabet_uses_two_bytes_per_sample(byte_source):
    alphabet = "".join(chr(0x100 + i) for i in range(300))
    encoder = AlphabetEncoder(alphabet, 1, byte_source)
    byte_source.next_bytes.return_value = bytes([0x01, 0x2B] * encoder.step)

    assert encoder.generate() == chr(0x100 + 0x12B)

    byte_source.next_bytes.assert_called_once_with(2 * encoder.step)


def test_single_symbol_alphabet(byte_source):
    assert encode_random("A", 5, byte_source) == "AAAAA"
    assert encode_random("X", 10, byte_source) == "XXXXXXXXXX"
    assert not byte_source.next_bytes.called


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_size(byte_source, size: int):
    assert encode_random(NANOID_ALPHABET, size, byte_source) == ""
    assert not byte_source.next_bytes.called


@pytest.mark.parametrize("alphabet", ["", "aba"])
def test_invalid_alphabet(alphabet: str):
    with pytest.raises(InvalidAlphabet):
        AlphabetEncoder(alphabet, 5)


@pytest.mark.parametrize(
    "alphabet", ["01", "abc", "0123456789", BASE58, NANOID_ALPHABET]
)
@pytest.mark.parametrize("size", [0, 1, 2, 5, 21, 100, 250])
def test_length_and_membership(alphabet: str, size: int):
    result = encode_random(alphabet, size)

    assert len(result) == size
    assert set(result) <= set(alphabet)


def test_digits():
    assert re.fullmatch("[0-9]{5}", encode_random("0123456789", 5))


def test_two_symbols_balanced():
    counts = Counter(encode_random("AB", 1000))

    assert set(counts) == {"A", "B"}
    assert 400 < counts["A"] < 600


def _chi_squared(counts: Counter, alphabet: str) -> float:
    total = sum(counts.values())
    expected = total / len(alphabet)
    return sum((counts[c] - expected) ** 2 / expected for c in alphabet)


def test_uniform_distribution():
    alphabet = "abcdefghij"
    counts = Counter(encode_random(alphabet, 100_000))

    # 9 degrees of freedom; 40 is far beyond the 0.9999 quantile (~33.7)
    assert _chi_squared(counts, alphabet) < 40


def test_no_modulo_bias():
    # 256 % 58 == 24: byte % 58 would favour the first 24 symbols by 25%
    counts = Counter(encode_random(BASE58, 116_000))
    low = sum(counts[c] for c in BASE58[:24]) / 24
    high = sum(counts[c] for c in BASE58[24:]) / 34

    assert 0.95 < low / high < 1.05
    # 57 degrees of freedom; 120 is far beyond the 0.9999 quantile (~106)
    assert _chi_squared(counts, BASE58) < 120


def test_unique():
    assert len({encode_random(NANOID_ALPHABET, 16) for _ in range(10_000)}) == 10_000
