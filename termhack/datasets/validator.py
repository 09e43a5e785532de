"""
Candidate-list validator for termhack.

What this module does:
- Validate a newline-delimited candidate file (one password per line).
- Enforce formatting rules (no inner whitespace, one fixed length L taken from
  the first valid line).
- Detect duplicates, blank lines and length mismatches; compute the SHA-256 of
  the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line
  summary.

Typical use:
    from termhack.datasets import validate_candidates, pretty_summary
    rep = validate_candidates("dumps/terminal_07.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class CandidateReport:
    """Diagnostics and metadata for one candidate file."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    length: int            # password length L (0 if no valid line)
    count: int             # number of VALID passwords (duplicates included)
    unique_count: int      # distinct valid passwords
    blank_lines: int       # empty/whitespace-only lines (skipped, not an error)
    invalid_lines: int     # wrong length or inner whitespace
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]      # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int, int, int]:
    """
    Load passwords from a text file and validate them.

    Rules:
      - one token per line, surrounding whitespace ignored
      - no whitespace inside the token
      - every token has the length of the first valid one

    Returns:
      (valid_words, length, blank_count, invalid_count)
    """
    valid: List[str] = []
    L = 0
    blank = 0
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if any(ch.isspace() for ch in w):
                invalid += 1
                continue
            if not valid:
                L = len(w)
            if len(w) == L:
                valid.append(w)
            else:
                invalid += 1

    return valid, L, blank, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_candidates(path: str) -> Dict:
    """
    Validate a candidate password file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see CandidateReport schema). `passed`
        is strict: the file exists, holds at least one password, and has no
        invalid lines. Duplicates are reported but do not fail validation,
        since the pool drops them anyway.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"candidate file not found: {path}")
        rep = CandidateReport(path, False, 0, 0, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, L, blank, invalid = _load_and_check(p)
    unique = set(words)

    if not words:
        issues.append("candidate file contains 0 valid passwords")
    if invalid:
        issues.append(f"{invalid} invalid line(s) (length != {L} or inner whitespace)")
    if len(unique) != len(words):
        issues.append(f"{len(words) - len(unique)} duplicate line(s)")

    rep = CandidateReport(
        path=str(p),
        exists=True,
        length=L,
        count=len(words),
        unique_count=len(unique),
        blank_lines=blank,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        L=7 | candidates=12 (uniq=12, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"L={report['length']} | candidates={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
