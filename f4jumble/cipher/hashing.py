"""Narrow personalized-hash interface over ``hashlib.blake2b``.

The transform never supplies a key or a salt; only the personalization tag
and the digest length vary between calls.
"""
from __future__ import annotations

import hashlib

from ..errors import InternalHashError


_HASH_FAILURES = (ValueError, TypeError, OverflowError, MemoryError)


def new_personalized_hash(person: bytes, digest_size: int):
    try:
        return hashlib.blake2b(digest_size=digest_size, person=person)
    except _HASH_FAILURES as exc:
        raise InternalHashError(f"cannot construct BLAKE2b (person={person!r}, digest_size={digest_size}): {exc}") from exc


def personalized_digest(person: bytes, data: bytes, digest_size: int) -> bytes:
    h = new_personalized_hash(person, digest_size)
    try:
        h.update(data)
    except _HASH_FAILURES as exc:
        raise InternalHashError(f"cannot feed BLAKE2b input: {exc}") from exc
    return h.digest()
