from __future__ import annotations

import logging
from typing import List, Optional

from f4jumble.cipher.params import MIN_LEN_M
from f4jumble.config import Settings, load_settings
from f4jumble.vectors import check_vectors

from .avalanche import compute_avalanche
from .report import EvaluationReport
from .roundtrip import run_roundtrip_tests

logger = logging.getLogger(__name__)


def avalanche_lengths(max_len: int) -> List[int]:
    """Message lengths sampled for avalanche, none longer than ``max_len``."""
    candidates = {MIN_LEN_M, 83, 128, 1024, max_len}
    return sorted(n for n in candidates if n <= max_len)


def run_evaluation(settings: Optional[Settings] = None) -> EvaluationReport:
    """Run the known-answer check, roundtrip tests and avalanche in both directions."""
    s = settings or load_settings()

    ok, errs = check_vectors()
    if not ok:
        logger.error("known-answer vectors failed: %s", "; ".join(errs))

    roundtrip = run_roundtrip_tests(
        num_vectors=s.roundtrip_vectors,
        seed=s.global_seed,
        max_len=s.max_sample_len,
    )
    if not roundtrip.is_perfect:
        logger.warning("roundtrip failures: %d/%d", roundtrip.failed, roundtrip.total_vectors)

    lengths = avalanche_lengths(s.max_sample_len)
    avalanche = [
        compute_avalanche(trials=s.avalanche_trials, seed=s.global_seed, lengths=lengths, direction=d)
        for d in ("jumble", "unjumble")
    ]

    return EvaluationReport(
        vectors_ok=ok,
        vector_errors=errs,
        roundtrip_results=[roundtrip],
        avalanche_results=avalanche,
    )
