"""CLI entry point for evaluating the jumbling transform.

Usage:
    python scripts/run_evaluation.py                              # defaults from .env / environment
    python scripts/run_evaluation.py --vectors 50 --trials 20     # quick run
    python scripts/run_evaluation.py --output-dir runs --verbose
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pydantic import ValidationError

from f4jumble.config import load_settings, with_overrides
from f4jumble.evaluation import run_evaluation
from f4jumble.utils.repro import make_run_dir, write_json, write_text


def main() -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="F4Jumble evaluation: known-answer vectors, roundtrip and avalanche",
    )
    parser.add_argument(
        "--vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Roundtrip messages to test (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--trials", type=int, default=settings.avalanche_trials,
        help=f"Avalanche trials per direction (default: {settings.avalanche_trials})",
    )
    parser.add_argument(
        "--max-len", type=int, default=settings.max_sample_len,
        help=f"Longest sampled message length (default: {settings.max_sample_len})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.runs_dir,
        help=f"Output directory (default: {settings.runs_dir})",
    )
    parser.add_argument(
        "--no-write", action="store_true",
        help="Print the summary only, do not write report files",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        run_settings = with_overrides(
            settings,
            roundtrip_vectors=args.vectors,
            avalanche_trials=args.trials,
            max_sample_len=args.max_len,
            global_seed=args.seed,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    report = run_evaluation(run_settings)

    summary = report.to_summary()
    print(summary)

    if not args.no_write:
        paths = make_run_dir(args.output_dir, "f4jumble_eval")
        write_json(paths.report_json, report.to_dict())
        write_text(paths.summary_txt, summary + "\n")
        print(f"\nReport written to {paths.run_dir}", file=sys.stderr)

    return 0 if report.all_pass else 1


if __name__ == "__main__":
    sys.exit(main())
