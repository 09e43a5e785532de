"""
Entropy (expected information gain).

Idea:
  For each candidate g, partition CURRENT candidates by likeness and compute
  the Shannon entropy H of the bucket distribution; pick g with max H.
  Tie-break: earliest candidate.
"""

from __future__ import annotations

from .base import BaseStrategy, register
from .partition import GuessStats


@register
class EntropyStrategy(BaseStrategy):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    def key(self, stats: GuessStats):
        return -stats.entropy_bits
