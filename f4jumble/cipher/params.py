from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidLength


MIN_LEN_M = 48
MAX_LEN_M = 4194368
# Natural BLAKE2b output size; also the cap on the left branch.
LEN_H = 64


@dataclass(frozen=True)
class Split:
    """Branch lengths for one message: ``len_l + len_r == len(message)``."""
    len_l: int
    len_r: int


def check_length(length: int) -> None:
    if length < MIN_LEN_M or length > MAX_LEN_M:
        raise InvalidLength(length, MIN_LEN_M, MAX_LEN_M)


def split_lengths(length: int) -> Split:
    """Validate ``length`` and return the left/right branch sizes.

    The left branch is capped at LEN_H so that H never truncates its digest;
    the right branch takes whatever remains and is always at least as long.
    """
    check_length(length)
    len_l = min(LEN_H, length // 2)
    return Split(len_l=len_l, len_r=length - len_l)
