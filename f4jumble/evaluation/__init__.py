"""Evaluation tooling for the jumbling transform.

Provides roundtrip verification in both directions, single-bit avalanche
measurement and an aggregate report.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests
from .avalanche import AvalancheResult, compute_avalanche, hamming_distance_bytes, flip_bit
from .report import EvaluationReport
from .suite import avalanche_lengths, run_evaluation

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "AvalancheResult",
    "compute_avalanche",
    "hamming_distance_bytes",
    "flip_bit",
    "EvaluationReport",
    "avalanche_lengths",
    "run_evaluation",
]
