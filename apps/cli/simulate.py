# apps/cli/simulate.py
"""
Batch simulation entry point.

This script:
  1) Validates the candidate file (prints counts + SHA, flags bad lines).
  2) Plays one terminal per hidden password with the requested strategy.
  3) Writes:
       - CSV:  per-case results + guess/likeness/remaining columns per attempt
       - JSON: manifest with config, candidate hash and batch summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List

from termhack.datasets import validate_candidates, pretty_summary, read_candidates
from termhack.harness import (
    run_batch, write_csv, write_manifest, summarize_results, timestamp_id, TERMINAL_MAX_ATTEMPTS,
)
from termhack.solvers import DEFAULT_STRATEGY, create_strategy, get_strategy_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="termhack-simulate",
        description="termhack: measure a recommendation strategy on a candidate list",
    )
    ap.add_argument("--file", required=True, help="candidate file, one password per line")
    ap.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=get_strategy_ids(),
                    help="recommendation strategy")
    ap.add_argument("--max-turns", type=int, default=TERMINAL_MAX_ATTEMPTS,
                    help="attempts before lockout")
    ap.add_argument("--sample", type=int,
                    help="play only K hidden passwords (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = bar when stderr is a terminal)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def main(argv: List[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.max_turns < 1:
        ap.error("--max-turns must be >= 1")
    if args.sample is not None and args.sample < 1:
        ap.error("--sample must be >= 1")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # 1) Validate the candidate file and print a one-liner summary
    rep = validate_candidates(args.file)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        return 2

    candidates = read_candidates(args.file)
    strategy = create_strategy(args.strategy)

    # 2) Choose cases (deterministic sample by seed)
    cases = list(dict.fromkeys(candidates))
    if args.sample is not None and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_batch(strategy, candidates, answers=cases,
                        max_turns=args.max_turns, progress=show_bar)

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, length=rep["length"])

    summary = summarize_results(results)
    manifest = {
        "run_id": run_id,
        "config": vars(args),
        "candidates": rep,
        "strategy_id": strategy.id,
        **summary,
    }
    write_manifest(manifest, str(manifest_path))

    solved = sum(1 for r in results if r["success"])
    print(f"Solved {solved}/{summary['num_cases']} within {args.max_turns} attempts")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
