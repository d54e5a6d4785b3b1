"""Structured evaluation report builder.

Aggregates known-answer checks, roundtrip tests and avalanche measurements
into a single serializable report.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from .avalanche import AvalancheResult
from .roundtrip import RoundtripResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    vectors_ok: bool = False
    vector_errors: List[str] = field(default_factory=list)
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    avalanche_results: List[AvalancheResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def all_pass(self) -> bool:
        return (
            self.vectors_ok
            and all(r.is_perfect for r in self.roundtrip_results)
            and all(a.passes for a in self.avalanche_results)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "vectors": {"ok": self.vectors_ok, "errors": list(self.vector_errors)},
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "avalanche": [a.to_dict() for a in self.avalanche_results],
            "summary": {
                "all_pass": self.all_pass,
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "avalanche_all_pass": all(a.passes for a in self.avalanche_results),
            },
        }

    def to_summary(self) -> str:
        """Human-readable summary."""
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        status = "PASS" if self.vectors_ok else "FAIL"
        lines.append(f"\nKnown-answer vectors: [{status}]")
        for err in self.vector_errors:
            lines.append(f"  {err}")

        if self.roundtrip_results:
            lines.append("\nRoundtrip Tests:")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.avalanche_results:
            lines.append("\nAvalanche:")
            for a in self.avalanche_results:
                lines.append(f"  {a.summary()}")

        return "\n".join(lines)
