import random

import pytest

from f4jumble import (
    MAX_LEN_M,
    MIN_LEN_M,
    InvalidLength,
    f4jumble,
    f4jumble_inv,
    jumble,
    unjumble,
)
from f4jumble.vectors import TEST_VECTORS, check_vectors


NORMAL = bytes.fromhex(
    "5d7a8f739a2d9e945b0ce152a8049e294c4d6e66b164939daffa2ef6ee692148"
    "1cdd86b3cc4318d9614fc820905d042b"
)
JUMBLED = bytes.fromhex(
    "0304d029141b995da5387c1259706735"
    "04d6c764d91ea6c0821237"
    "70c7139ccd88ee27368cd0c0921a0444c8e5858d22"
)


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


# ---------------------------------------------------------------------------
# Known-answer vector
# ---------------------------------------------------------------------------

def test_known_answer_jumble():
    assert jumble(NORMAL) == JUMBLED


def test_known_answer_unjumble():
    assert unjumble(JUMBLED) == NORMAL


def test_known_answer_input_bytes():
    # Byte list of the published example input.
    assert NORMAL[24:27] == bytes([0xaf, 0xfa, 0x2e])
    assert len(NORMAL) == 48 and len(JUMBLED) == 48


def test_check_vectors():
    ok, errs = check_vectors()
    assert ok, errs
    assert TEST_VECTORS[0].normal == NORMAL
    assert TEST_VECTORS[0].jumbled == JUMBLED


def test_aliases():
    assert f4jumble is jumble
    assert f4jumble_inv is unjumble


def test_accepts_bytearray_and_memoryview():
    assert jumble(bytearray(NORMAL)) == JUMBLED
    assert unjumble(memoryview(JUMBLED)) == NORMAL
    assert isinstance(jumble(bytearray(NORMAL)), bytes)


# ---------------------------------------------------------------------------
# Round trip, involution, length preservation
# ---------------------------------------------------------------------------

LENGTHS = [48, 49, 64, 65, 127, 128, 129, 130, 191, 192, 193, 255, 256, 1000, 4096, 65537]


@pytest.mark.parametrize("n", LENGTHS)
def test_roundtrip_and_involution(n):
    rng = random.Random(n)
    msg = _rand_bytes(rng, n)

    jumbled = jumble(msg)
    assert len(jumbled) == n
    assert jumbled != msg
    assert unjumble(jumbled) == msg

    unjumbled = unjumble(msg)
    assert len(unjumbled) == n
    assert jumble(unjumbled) == msg


def test_deterministic():
    rng = random.Random(7)
    msg = _rand_bytes(rng, 300)
    assert jumble(msg) == jumble(msg)
    assert unjumble(msg) == unjumble(msg)


def test_single_byte_change_cascades():
    rng = random.Random(2024)
    for n in (48, 100, 500):
        for _ in range(10):
            msg = _rand_bytes(rng, n)
            pos = rng.randrange(n)
            tampered = bytearray(msg)
            tampered[pos] ^= 1 << rng.randrange(8)
            a, b = jumble(msg), jumble(bytes(tampered))
            differing = sum(1 for x, y in zip(a, b) if x != y)
            assert differing / n > 0.25


# ---------------------------------------------------------------------------
# Length bounds
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("fn", [jumble, unjumble])
@pytest.mark.parametrize("n", [0, 1, MIN_LEN_M - 1])
def test_too_short_rejected(fn, n):
    with pytest.raises(InvalidLength) as ei:
        fn(b"\x00" * n)
    assert ei.value.length == n
    assert ei.value.min_len == MIN_LEN_M
    assert ei.value.max_len == MAX_LEN_M


@pytest.mark.parametrize("fn", [jumble, unjumble])
def test_too_long_rejected(fn):
    with pytest.raises(InvalidLength):
        fn(b"\x00" * (MAX_LEN_M + 1))


def test_invalid_length_is_value_error():
    with pytest.raises(ValueError):
        jumble(b"short")


def test_invalid_length_detected_before_hashing(monkeypatch):
    from f4jumble.cipher import rounds

    def boom(*args, **kwargs):
        raise AssertionError("round function called for invalid length")

    monkeypatch.setattr(rounds, "personalized_digest", boom)
    with pytest.raises(InvalidLength):
        jumble(b"\x01" * (MIN_LEN_M - 1))


def test_minimum_length_roundtrip():
    msg = bytes(range(MIN_LEN_M))
    assert unjumble(jumble(msg)) == msg


def test_maximum_length_roundtrip():
    rng = random.Random(99)
    msg = rng.randbytes(MAX_LEN_M)
    out = jumble(msg)
    assert len(out) == MAX_LEN_M
    assert unjumble(out) == msg
