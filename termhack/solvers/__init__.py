from __future__ import annotations
from typing import Iterable, List
from .base import BaseStrategy, Recommendation, REGISTRY, register
from .partition import GuessStats, partition_stats

from . import expected_left  # noqa: F401
from . import minimax  # noqa: F401
from . import entropy  # noqa: F401

DEFAULT_STRATEGY = "expected_left"


def create_strategy(strategy_id: str) -> BaseStrategy:
    """
    Factory: instantiate a registered strategy by id.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def recommend(candidates: Iterable[str], strategy: str = DEFAULT_STRATEGY) -> Recommendation:
    """
    Recommend the next guess among `candidates` (a CandidatePool or any
    sequence of equal-length passwords).

    Raises NothingToRecommend when fewer than two candidates remain.
    """
    return create_strategy(strategy).recommend(list(candidates))


__all__ = [
    "BaseStrategy", "Recommendation", "GuessStats", "REGISTRY", "register",
    "partition_stats", "create_strategy", "get_strategy_ids", "recommend",
    "DEFAULT_STRATEGY",
]
