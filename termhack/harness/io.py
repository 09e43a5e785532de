"""
Report writers for simulation runs.

One CSV row per hidden password, tracing how the pool shrank:

    strategy, L, candidates, answer, success, contradiction, guesses, time_ms,
    guess_1, likeness_1, remaining_1, ..., guess_T, likeness_T, remaining_T

`remaining_i` is the pool size right after attempt i was applied, so a row
reads like the player's own notes: "typed CODEX, likeness 2, one left".
Unused attempt columns are left blank.

The manifest is a JSON summary of the whole batch (see summarize_results).
"""

from __future__ import annotations

from pathlib import Path
from statistics import mean
from typing import Dict, List
import csv
import json
import datetime as dt

STEP_COLUMNS = ("guess", "likeness", "remaining")


def csv_fields(max_turns: int) -> List[str]:
    fields = ["strategy", "L", "candidates", "answer", "success", "contradiction",
              "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"{col}_{i}" for col in STEP_COLUMNS]
    return fields


def _case_row(r: Dict, max_turns: int, length: int) -> Dict:
    row = {
        "strategy": r.get("strategy_id", "?"),
        "L": length,
        "candidates": r["candidates"],
        "answer": r["answer"],
        "success": r["success"],
        "contradiction": r["contradiction"],
        "guesses": r["guesses"],
        "time_ms": round(float(r["time_ms"]), 3),
    }
    hist = r.get("history", [])
    for i in range(1, max_turns + 1):
        step = hist[i - 1] if i <= len(hist) else ("", "", "")
        for col, value in zip(STEP_COLUMNS, step):
            row[f"{col}_{i}"] = value
    return row


def write_csv(results: List[Dict], path: str, max_turns: int, length: int) -> str:
    """
    Serialize a batch of run_case results to CSV. Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=csv_fields(max_turns))
        w.writeheader()
        for r in results:
            w.writerow(_case_row(r, max_turns, length))
    return str(p)


def summarize_results(results: List[Dict]) -> Dict:
    """
    Batch-level numbers for the manifest.

    - success_rate:       solved within the budget / cases
    - mean_guesses:       over solved cases only (None if none solved)
    - contradictions:     cases stopped by an emptied pool
    - mean_after_first:   mean pool size after the first attempt, i.e. how
                          much the opening recommendation narrows things
    """
    wins = [r for r in results if r["success"]]
    firsts = [r["history"][0][2] for r in results if r["history"]]
    return {
        "num_cases": len(results),
        "success_rate": len(wins) / len(results) if results else 0.0,
        "mean_guesses": mean(r["guesses"] for r in wins) if wins else None,
        "contradictions": sum(1 for r in results if r["contradiction"]),
        "mean_after_first": mean(firsts) if firsts else None,
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """Write the run manifest as indented JSON. Returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """Compact UTC run id for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
