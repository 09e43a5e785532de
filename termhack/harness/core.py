"""
Simulation harness core primitives.

- run_case:  auto-play one terminal (one hidden password) with a strategy.
- run_batch: run many terminals in sequence, optionally with a tqdm bar.
- Enforces the terminal's attempt budget at the harness layer.

Each case plays the way a careful player would: ask the strategy for a
recommendation, type it, read the likeness, eliminate. When one candidate is
left it is typed directly.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, List, Sequence, Tuple

from tqdm import tqdm

from termhack.engine import CandidatePool, Contradiction, score
from termhack.solvers import BaseStrategy

logger = logging.getLogger(__name__)

# Attempts before the terminal locks out.
TERMINAL_MAX_ATTEMPTS = 4


def _assert_attempts(max_turns: int) -> None:
    """Guardrail: a terminal always allows at least one attempt."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        strategy: BaseStrategy,
        answer: str,
        *,
        candidates: Sequence[str],
        max_turns: int = TERMINAL_MAX_ATTEMPTS,
        feedback: Callable[[str, str], int] = score,
) -> Dict:
    """
    Execute one game until the password is typed or attempts run out.

    Args:
        strategy:   a BaseStrategy (see termhack.solvers.create_strategy)
        answer:     the hidden password; must be one of `candidates`
        candidates: the passwords shown on the terminal
        max_turns:  attempt budget (default 4)
        feedback:   feedback(guess, answer) -> likeness the player enters;
                    swap in a noisy one to model misread terminals

    Returns:
        dict with keys:
            success (bool), contradiction (bool), guesses (int), time_ms (float),
            history (list[(guess, likeness, remaining)]), answer (str),
            candidates (int, pool size before the first guess)

        `remaining` is the pool size right after that guess was applied.
    """
    _assert_attempts(max_turns)
    if answer not in candidates:
        raise ValueError(f"answer {answer!r} is not among the candidates")

    pool = CandidatePool.initialize(candidates)
    start_size = len(pool)
    history: List[Tuple[str, int, int]] = []
    total_ms = 0.0

    def result(success: bool, contradiction: bool = False) -> Dict:
        return {
            "success": success, "contradiction": contradiction,
            "guesses": len(history), "time_ms": total_ms, "history": history,
            "answer": answer, "candidates": start_size,
        }

    for _ in range(max_turns):
        t0 = time.perf_counter_ns()
        if len(pool) == 1:
            guess = pool.answer()
        else:
            guess = strategy.recommend(pool.view()).guess
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        likeness = feedback(guess, answer)
        outcome = pool.eliminate(guess, likeness)
        history.append((guess, likeness, len(pool)))

        if guess == answer:
            return result(True)
        if isinstance(outcome, Contradiction):
            # misreported likeness ruled out every candidate
            logger.warning("pool emptied while %r was the answer", answer)
            return result(False, contradiction=True)

    return result(False)


def run_batch(
        strategy: BaseStrategy,
        candidates: Sequence[str],
        *,
        answers: Sequence[str] | None = None,
        max_turns: int = TERMINAL_MAX_ATTEMPTS,
        progress: bool = False,
) -> List[Dict]:
    """
    Run one case per hidden password in `answers` (default: every candidate).
    Each result is stamped with the strategy id.
    """
    _assert_attempts(max_turns)
    cases = list(candidates if answers is None else answers)

    out: List[Dict] = []
    for ans in tqdm(cases, ncols=80, desc="Hacking", unit="terminal", disable=not progress):
        r = run_case(strategy, ans, candidates=candidates, max_turns=max_turns)
        r["strategy_id"] = strategy.id
        out.append(r)
    return out
