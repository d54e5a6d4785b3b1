from __future__ import annotations

from typing import List

from .hashing import personalized_digest
from .params import LEN_H
from .personalization import g_pers, h_pers


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two byte strings of equal length."""
    if len(a) != len(b):
        raise ValueError("xor_bytes length mismatch")
    return bytes(x ^ y for x, y in zip(a, b))


def _ceil_div(num: int, den: int) -> int:
    return (num + den - 1) // den


def g_round(i: int, u: bytes, out_len: int) -> bytes:
    """Expanding round function: ``out_len`` bytes from short input ``u``.

    Concatenates 64-byte BLAKE2b digests of ``u`` under tags G(i, 0),
    G(i, 1), ... and truncates the result to ``out_len``.
    """
    blocks: List[bytes] = [
        personalized_digest(g_pers(i, j), u, LEN_H)
        for j in range(_ceil_div(out_len, LEN_H))
    ]
    return b"".join(blocks)[:out_len]


def h_round(i: int, u: bytes, out_len: int) -> bytes:
    """Compressing round function: one BLAKE2b digest of ``out_len`` bytes."""
    return personalized_digest(h_pers(i), u, out_len)
