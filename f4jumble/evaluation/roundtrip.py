"""Algebraic roundtrip verification: M = unjumble(jumble(M)) and M = jumble(unjumble(M)).

Generates randomized messages of random valid lengths and verifies that both
directions of the transform invert each other for every message.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from f4jumble.cipher.feistel import jumble, unjumble
from f4jumble.cipher.params import MAX_LEN_M, MIN_LEN_M

logger = logging.getLogger(__name__)

# Hex dumps in failure records are cut to this many bytes.
_HEX_PREVIEW = 32


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip vector."""
    vector_index: int
    direction: str           # "jumble_then_unjumble" or "unjumble_then_jumble"
    length: int
    message_hex: str
    output_hex: str          # What the round trip returned (should equal message)
    error: Optional[str]     # Exception message if either direction threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing."""
    total_vectors: int
    passed: int
    failed: int
    min_len: int
    max_len: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["is_perfect"] = self.is_perfect
        return d

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] roundtrip: {self.passed}/{self.total_vectors} vectors passed "
            f"(lengths {self.min_len}..{self.max_len}, {self.elapsed_seconds:.2f}s)"
        )


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def _check_one(message: bytes, direction: str) -> bytes:
    if direction == "jumble_then_unjumble":
        return unjumble(jumble(message))
    return jumble(unjumble(message))


def run_roundtrip_tests(
    *,
    num_vectors: int = 200,
    seed: int = 1337,
    min_len: int = MIN_LEN_M,
    max_len: int = 4096,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification in both directions across many messages.

    Each vector is a message of uniformly random length in
    ``[min_len, max_len]`` and counts as passed only if both
    ``unjumble(jumble(m)) == m`` and ``jumble(unjumble(m)) == m`` hold.

    Args:
        num_vectors: Number of random messages to test.
        seed: Random seed for deterministic reproducibility.
        min_len: Shortest message length to draw.
        max_len: Longest message length to draw.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    if not MIN_LEN_M <= min_len <= max_len <= MAX_LEN_M:
        raise ValueError(f"length range must lie within {MIN_LEN_M}..{MAX_LEN_M}, got {min_len}..{max_len}")

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        msg = _rand_bytes(rng, rng.randint(min_len, max_len))
        ok = True

        for direction in ("jumble_then_unjumble", "unjumble_then_jumble"):
            try:
                out = _check_one(msg, direction)
                error = None
            except Exception as exc:
                out = b""
                error = str(exc)

            if error is None and out == msg:
                continue

            ok = False
            logger.debug("roundtrip vector %d failed (%s, len=%d)", i, direction, len(msg))
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    direction=direction,
                    length=len(msg),
                    message_hex=msg[:_HEX_PREVIEW].hex(),
                    output_hex=out[:_HEX_PREVIEW].hex() if error is None else "<error>",
                    error=error,
                ))

        if ok:
            passed += 1
        else:
            failed += 1

    elapsed = time.perf_counter() - start
    logger.info("roundtrip: %d/%d vectors passed in %.2fs", passed, num_vectors, elapsed)

    return RoundtripResult(
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        min_len=min_len,
        max_len=max_len,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
