"""
Minimax (smallest worst-case bucket).

Idea:
  Assume the terminal answers as unhelpfully as possible: after guessing g the
  pool shrinks to the LARGEST bucket. Pick the g whose largest bucket is
  smallest. Tie-break: earliest candidate.

More conservative than expected_left when attempts are scarce.
"""

from __future__ import annotations

from .base import BaseStrategy, register
from .partition import GuessStats


@register
class MinimaxStrategy(BaseStrategy):
    id = "minimax"
    name = "Minimax Worst Bucket"
    version = "1.0.0"

    def key(self, stats: GuessStats):
        return stats.worst_case
