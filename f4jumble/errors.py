from __future__ import annotations


class F4JumbleError(Exception):
    """Base class for all errors raised by the f4jumble package."""


class InvalidLength(F4JumbleError, ValueError):
    """Message length is outside the range the transform accepts."""

    def __init__(self, length: int, min_len: int, max_len: int):
        self.length = length
        self.min_len = min_len
        self.max_len = max_len
        super().__init__(f"invalid message length: {length} (expected {min_len}..{max_len})")


class InternalHashError(F4JumbleError, RuntimeError):
    """The BLAKE2b primitive could not be constructed or fed input."""
