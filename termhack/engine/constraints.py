"""
Candidate filtering given session history.

Given:
  - a pool of candidate passwords
  - a history of (guess, likeness) observations

Return:
  - the candidates that would have produced exactly that likeness for EVERY
    observation.

This is the step that turns feedback into a shrinking candidate set. The pool
applies it one observation at a time; the harness and tests use the
multi-observation form directly.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .scoring import score

# History is a sequence of (guess, likeness) tuples.
History = Iterable[Tuple[str, int]]


def is_consistent(word: str, history: History) -> bool:
    """True if `word` reproduces every recorded likeness in `history`."""
    for g, fb in history:
        if score(g, word) != fb:
            return False
    return True


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with all of `history`.

    Args:
      words   : candidate passwords (all of one length)
      history : iterable of (guess, likeness) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).

    Raises:
      LengthMismatch if a guess and a candidate differ in length.
    """
    history = list(history)
    return [w for w in words if is_consistent(w, history)]
