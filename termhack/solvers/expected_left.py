"""
Expected Remaining Candidates.

Idea:
  For guess g, if the CURRENT candidates partition into buckets of sizes {c_k},
  the expected leftover after reading the likeness is:
      E[left | g] = sum_k ( (c_k / n) * c_k ) = (1/n) * sum_k c_k^2
  Minimize E[left]. Tie-break: earliest candidate.

This is the default strategy.
"""

from __future__ import annotations

from .base import BaseStrategy, register
from .partition import GuessStats


@register
class ExpectedLeftStrategy(BaseStrategy):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    def key(self, stats: GuessStats):
        return stats.expected_remaining
