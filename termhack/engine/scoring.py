"""
Likeness scoring for a (guess, password) pair.

The terminal reports "Likeness=N" after a failed attempt: the number of
positions where the guess and the real password hold the same character.
Unlike Wordle there is no "right letter, wrong place" signal, so the feedback
is a single integer in [0, L].

Properties:
  - symmetric:  score(a, b) == score(b, a)
  - reflexive:  score(a, a) == len(a)
  - exact:      characters are compared as-is (no case folding)

likeness_matrix() computes every pairwise score at once with numpy; the
recommendation engine needs all n^2 of them per call.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import LengthMismatch


def score(guess: str, password: str) -> int:
    """
    Count positions where `guess` and `password` hold the same character.

    Preconditions:
      - len(guess) == len(password), else LengthMismatch

    Examples:
      score("CODEX", "CODER") -> 4
      score("WATER", "TOWER") -> 2
    """
    if len(guess) != len(password):
        raise LengthMismatch(guess, len(password))
    return sum(1 for g, p in zip(guess, password) if g == p)


def likeness_matrix(words: Sequence[str]) -> np.ndarray:
    """
    Return an (n, n) int matrix M with M[i, j] == score(words[i], words[j]).

    All words must share one length (that of words[0]); an empty sequence
    gives a (0, 0) matrix.
    """
    n = len(words)
    if n == 0:
        return np.zeros((0, 0), dtype=np.int64)

    L = len(words[0])
    for w in words:
        if len(w) != L:
            raise LengthMismatch(w, L)

    # (n, L) grid of single characters; broadcast to (n, n, L) and count hits
    grid = np.array([list(w) for w in words], dtype="<U1").reshape(n, L)
    hits = grid[:, None, :] == grid[None, :, :]
    return hits.sum(axis=2, dtype=np.int64)
