"""
Result of applying one observation (or removal) to a candidate pool.

Exactly one of:
  - Narrowed(size)              more than one candidate remains
  - Solved(password)            exactly one remains; it is the answer
  - Contradiction(guess, fb)    none remain; some feedback was wrong

Callers dispatch on the type; the pool size alone is never used as a signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Narrowed:
    size: int


@dataclass(frozen=True)
class Solved:
    password: str


@dataclass(frozen=True)
class Contradiction:
    guess: str
    feedback: int | None = None  # None when caused by remove()

    def __str__(self) -> str:
        return "no candidate matches all feedback so far"


EliminationOutcome = Union[Narrowed, Solved, Contradiction]


def outcome_for(candidates, guess: str, feedback: int | None) -> EliminationOutcome:
    """Classify the surviving candidates into one of the three outcomes."""
    n = len(candidates)
    if n == 0:
        return Contradiction(guess, feedback)
    if n == 1:
        return Solved(candidates[0])
    return Narrowed(n)
