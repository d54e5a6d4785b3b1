"""Unkeyed 4-round Feistel construction (F4Jumble) and its inverse.

Pass raw bytes through ``jumble`` before a Base64 / Bech32 style encoding and
through ``unjumble`` after decoding. Any change to the input produces a
completely different jumbled output, so a tampered encoded string cannot keep
most of its characters intact.

Diagram: https://zips.z.cash/zip-0316-f4.png
"""
from __future__ import annotations

from .params import split_lengths
from .rounds import g_round, h_round, xor_bytes


def jumble(message: bytes) -> bytes:
    """Jumble ``message`` (48..4194368 bytes). Output has the same length.

    Raises InvalidLength before any hashing when the length is out of range.
    """
    message = bytes(message)
    split = split_lengths(len(message))
    len_l, len_r = split.len_l, split.len_r

    a, b = message[:len_l], message[len_l:]

    x = xor_bytes(b, g_round(0, a, len_r))
    y = xor_bytes(a, h_round(0, x, len_l))
    d = xor_bytes(x, g_round(1, y, len_r))
    c = xor_bytes(y, h_round(1, d, len_l))

    return c + d


def unjumble(jumbled: bytes) -> bytes:
    """Invert ``jumble``: ``unjumble(jumble(m)) == m``."""
    jumbled = bytes(jumbled)
    split = split_lengths(len(jumbled))
    len_l, len_r = split.len_l, split.len_r

    c, d = jumbled[:len_l], jumbled[len_l:]

    y = xor_bytes(c, h_round(1, d, len_l))
    x = xor_bytes(d, g_round(1, y, len_r))
    a = xor_bytes(y, h_round(0, x, len_l))
    b = xor_bytes(x, g_round(0, a, len_r))

    return a + b


f4jumble = jumble
f4jumble_inv = unjumble
