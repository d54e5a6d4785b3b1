"""Avalanche measurement for the jumbling transform.

Flips a single random input bit and measures how much of the output changes,
both as a fraction of differing bytes and of differing bits. A transform with
good diffusion changes almost every byte and about half of the bits.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np

from f4jumble.cipher.feistel import jumble, unjumble
from f4jumble.cipher.params import MIN_LEN_M

logger = logging.getLogger(__name__)


def hamming_distance_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("hamming distance length mismatch")
    x = np.frombuffer(a, dtype=np.uint8) ^ np.frombuffer(b, dtype=np.uint8)
    return int(np.unpackbits(x).sum())


def differing_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("byte difference length mismatch")
    return int(np.count_nonzero(np.frombuffer(a, dtype=np.uint8) != np.frombuffer(b, dtype=np.uint8)))


def flip_bit(data: bytes, bit_index: int) -> bytes:
    byte_i = bit_index // 8
    bit_i = bit_index % 8
    if byte_i < 0 or byte_i >= len(data):
        raise IndexError("bit_index out of range")
    out = bytearray(data)
    out[byte_i] ^= 1 << bit_i
    return bytes(out)


@dataclass
class AvalancheResult:
    """Single-bit-flip diffusion statistics for one direction of the transform."""
    direction: str              # "jumble" or "unjumble"
    num_trials: int
    lengths: List[int] = field(default_factory=list)

    byte_diff_mean: float = 0.0  # Mean fraction of differing output bytes (~1.0 ideal)
    byte_diff_min: float = 0.0
    bit_flip_mean: float = 0.0   # Mean fraction of flipped output bits (~0.5 ideal)
    bit_flip_std: float = 0.0
    bit_flip_min: float = 0.0
    bit_flip_max: float = 0.0

    @property
    def passes(self) -> bool:
        """Heuristic: >25% of bytes differ and bit flips within 0.45..0.55."""
        return self.byte_diff_mean > 0.25 and 0.45 <= self.bit_flip_mean <= 0.55

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["passes"] = self.passes
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        return (
            f"[{status}] avalanche({self.direction}): "
            f"bytes={self.byte_diff_mean:.4f} (min {self.byte_diff_min:.4f}), "
            f"bits={self.bit_flip_mean:.4f} +/- {self.bit_flip_std:.4f}"
        )


def compute_avalanche(
    *,
    trials: int = 100,
    seed: int = 1337,
    lengths: Sequence[int] = (MIN_LEN_M, 83, 128, 200, 1024),
    direction: str = "jumble",
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> AvalancheResult:
    """Measure diffusion of a single-bit input change.

    Each trial draws a length from ``lengths``, a random message of that
    length and a random bit position, transforms both the message and its
    one-bit variant, and records the fraction of output bytes and bits that
    differ.

    Args:
        trials: Number of random trials.
        seed: Random seed for reproducibility.
        lengths: Message lengths to sample from (all must be valid lengths).
        direction: "jumble" or "unjumble".
        progress_callback: Optional callback(current_trial, total_trials).

    Returns:
        AvalancheResult with aggregate statistics.
    """
    if direction == "jumble":
        fn = jumble
    elif direction == "unjumble":
        fn = unjumble
    else:
        raise ValueError(f"direction must be 'jumble' or 'unjumble', got '{direction}'")
    if not lengths:
        raise ValueError("lengths must not be empty")

    rng = random.Random(seed)
    byte_fracs: List[float] = []
    bit_fracs: List[float] = []

    for t in range(trials):
        if progress_callback:
            progress_callback(t, trials)

        n = rng.choice(list(lengths))
        msg = bytes(rng.randrange(0, 256) for _ in range(n))
        msg2 = flip_bit(msg, rng.randrange(0, n * 8))

        out1 = fn(msg)
        out2 = fn(msg2)

        byte_fracs.append(differing_bytes(out1, out2) / n)
        bit_fracs.append(hamming_distance_bytes(out1, out2) / (n * 8))

    byte_arr = np.asarray(byte_fracs, dtype=np.float64)
    bit_arr = np.asarray(bit_fracs, dtype=np.float64)

    result = AvalancheResult(
        direction=direction,
        num_trials=trials,
        lengths=sorted(set(int(n) for n in lengths)),
        byte_diff_mean=round(float(byte_arr.mean()), 6) if trials else 0.0,
        byte_diff_min=round(float(byte_arr.min()), 6) if trials else 0.0,
        bit_flip_mean=round(float(bit_arr.mean()), 6) if trials else 0.0,
        bit_flip_std=round(float(bit_arr.std(ddof=1)), 6) if trials > 1 else 0.0,
        bit_flip_min=round(float(bit_arr.min()), 6) if trials else 0.0,
        bit_flip_max=round(float(bit_arr.max()), 6) if trials else 0.0,
    )
    logger.info(result.summary())
    return result
