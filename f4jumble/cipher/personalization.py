"""BLAKE2b personalization tags for the F4Jumble round functions.

Every hash call in the transform uses a distinct 16-byte tag built from a
fixed prefix, the round-function kind, the round index and (for G) the
output block index.
"""
from __future__ import annotations


PERSONALIZATION_PREFIX = b"UA_F4Jumble_"


def _check_round(i: int) -> None:
    if i not in (0, 1):
        raise ValueError(f"round index must be 0 or 1, got {i}")


def h_pers(i: int) -> bytes:
    """Tag for H in round ``i``: prefix, ``'H'``, ``i``, two zero bytes."""
    _check_round(i)
    return PERSONALIZATION_PREFIX + b"H" + bytes([i, 0, 0])


def g_pers(i: int, j: int) -> bytes:
    """Tag for block ``j`` of G in round ``i``; ``j`` is little-endian 16-bit."""
    _check_round(i)
    if not 0 <= j <= 0xFFFF:
        raise ValueError(f"block index out of range: {j}")
    return PERSONALIZATION_PREFIX + b"G" + bytes([i, j & 0xFF, j >> 8])
