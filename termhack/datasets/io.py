"""
Candidate password readers.

Both readers strip surrounding whitespace, skip blank lines and keep case:
the terminal distinguishes "Tried" from "TRIED".
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional, TextIO


def read_candidates(p: Path | str) -> List[str]:
    """
    Read one candidate password per line from a UTF-8 file.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        return [ln.strip() for ln in f if ln.strip()]


def read_candidates_stream(stream: TextIO, prompt: str = "",
                           errput: Optional[TextIO] = None) -> List[str]:
    """
    Read candidates from an open text stream until a blank line or EOF.

    If `errput` is given, `prompt` is written to it before every line is read.
    A blank line before any candidate is ignored, so stray leading newlines
    don't end input early.
    """
    out: List[str] = []
    while True:
        if errput is not None:
            errput.write(prompt)
            errput.flush()
        raw = stream.readline()
        if not raw:
            break
        w = raw.strip()
        if not w:
            if out:
                break
            continue
        out.append(w)
    return out
