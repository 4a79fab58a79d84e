#!/usr/bin/env python3
"""
run_calibration.py — Score the analyzer against the labeled bill corpus.

Usage:
    python run_calibration.py                      # Full run
    python run_calibration.py --corpus-dir path/   # Custom corpus location
    python run_calibration.py --json               # Output JSON only (for CI)

Exit codes: 0 ok, 1 corpus missing/empty/malformed, 2 detection F1 too low.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from calibration.benchmark import run_benchmark, format_report, save_report
from calibration.corpus_parser import CorpusFormatError

# Below this document-level F1 (with enough pork samples to mean anything)
# the run counts as failing.
MIN_DETECTION_F1 = 0.5
MIN_PORK_SAMPLES = 5


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="PorkScan Calibration Runner")
    parser.add_argument(
        "--corpus-dir",
        default="calibration/corpus",
        help="Path to corpus directory (default: calibration/corpus)",
    )
    parser.add_argument(
        "--output-dir",
        default="calibration/reports",
        help="Directory for output reports (default: calibration/reports)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON only (for CI/automation)",
    )
    args = parser.parse_args(argv)

    corpus_dir = Path(args.corpus_dir)
    if not corpus_dir.is_dir():
        print(f"Error: Corpus directory not found: {corpus_dir}", file=sys.stderr)
        return 1

    try:
        result = run_benchmark(corpus_dir=corpus_dir)
    except CorpusFormatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValueError:
        print(f"Error: No samples found in {corpus_dir}", file=sys.stderr)
        return 1

    report_path, json_path = save_report(result, args.output_dir)

    if args.json:
        print(json_path.read_text(encoding="utf-8"))
    else:
        print(f"Loaded {result.total_samples} samples from {corpus_dir}")
        print(format_report(result))
        print(f"\nReport saved to: {report_path}")
        print(f"JSON saved to:   {json_path}")

    if result.detection.f1 < MIN_DETECTION_F1 and result.pork_samples > MIN_PORK_SAMPLES:
        print(f"\nDetection F1 below {MIN_DETECTION_F1}: calibration failing", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
