"""
Bucket statistics for every candidate guess.

For guess g, the CURRENT candidates (g included) split into buckets by
likeness score(g, p). With bucket sizes {c_k} over n candidates:

    expected_remaining(g) = sum_k c_k^2 / n      (kept exact, as a Fraction)
    worst_case(g)         = max_k c_k
    entropy_bits(g)       = sum_k (c_k / n) * log2(n / c_k)

expected_remaining is the expected pool size after guessing g if the true
password is uniform over the candidates. Since sum c_k == n, it is at most n.
Candidates are distinct, so g always sits alone in bucket L.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import List, Sequence

import numpy as np

from termhack.engine import likeness_matrix


@dataclass(frozen=True)
class GuessStats:
    guess: str
    index: int                    # position in the pool's stable order
    expected_remaining: Fraction
    worst_case: int
    entropy_bits: float
    buckets: int                  # number of non-empty buckets


def _entropy(counts: np.ndarray, n: int) -> float:
    # sorted so equal bucket multisets sum in the same order
    p = np.sort(counts[counts > 0]) / n
    return float(-(p * np.log2(p)).sum())


def partition_stats(candidates: Sequence[str]) -> List[GuessStats]:
    """Return one GuessStats per candidate, in candidate order."""
    n = len(candidates)
    if n == 0:
        return []

    M = likeness_matrix(candidates)
    L = len(candidates[0])

    out: List[GuessStats] = []
    for i, g in enumerate(candidates):
        counts = np.bincount(M[i], minlength=L + 1)
        sum_c2 = int((counts * counts).sum())
        out.append(GuessStats(
            guess=g,
            index=i,
            expected_remaining=Fraction(sum_c2, n),
            worst_case=int(counts.max()),
            entropy_bits=_entropy(counts, n),
            buckets=int((counts > 0).sum()),
        ))
    return out
