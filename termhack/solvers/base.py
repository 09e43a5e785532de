from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Sequence, Type

from termhack.engine import NothingToRecommend
from .partition import GuessStats, partition_stats

logger = logging.getLogger(__name__)

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


@dataclass(frozen=True)
class Recommendation:
    guess: str
    expected_remaining: Fraction
    worst_case: int
    entropy_bits: float
    strategy: str


# ---- Base class that strategies inherit ----
class BaseStrategy:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def key(self, stats: GuessStats):
        """Sort key; the candidate with the SMALLEST key is recommended."""
        raise NotImplementedError("Override in subclass")

    def recommend(self, candidates: Sequence[str]) -> Recommendation:
        """
        Pick the candidate with the smallest key; ties go to the earliest
        candidate in `candidates`.

        Raises NothingToRecommend for fewer than two candidates.
        """
        candidates = list(candidates)
        if len(candidates) <= 1:
            raise NothingToRecommend(len(candidates))

        stats = partition_stats(candidates)
        best = min(stats, key=lambda s: (self.key(s), s.index))
        logger.debug("%s over %d candidates -> %s (E=%s, worst=%d, H=%.3f)",
                     self.id, len(candidates), best.guess,
                     best.expected_remaining, best.worst_case, best.entropy_bits)
        return Recommendation(
            guess=best.guess,
            expected_remaining=best.expected_remaining,
            worst_case=best.worst_case,
            entropy_bits=best.entropy_bits,
            strategy=self.id,
        )
