"""
The live set of candidate passwords for one session.

A pool is seeded once and afterwards only shrinks: eliminate() keeps the
candidates consistent with a new observation, remove() strikes one candidate
by hand. Both validate before mutating, so a rejected call leaves the pool
exactly as it was. A session that needs to start over builds a new pool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .errors import EmptyCandidateSet, LengthMismatch, NotPresent, Unsolved
from .outcomes import EliminationOutcome, outcome_for
from .constraints import filter_candidates
from .validation import validate_feedback, validate_password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    """One applied (guess, likeness) pair."""
    guess: str
    feedback: int


class CandidatePool:
    def __init__(self, candidates: Iterable[str]):
        words = list(candidates)
        if not words:
            raise EmptyCandidateSet()

        N = len(validate_password(words[0]))
        seen = set()
        unique: List[str] = []
        for w in words:
            validate_password(w, N)
            if w not in seen:
                seen.add(w)
                unique.append(w)

        if len(unique) != len(words):
            logger.debug("dropped %d duplicate candidate(s)", len(words) - len(unique))

        self._length = N
        self._passwords = unique
        self._history: List[Observation] = []
        logger.debug("pool initialized: %d candidates of length %d", len(unique), N)

    @classmethod
    def initialize(cls, candidates: Iterable[str]) -> "CandidatePool":
        """Build a pool; see the constructor for the failure modes."""
        return cls(candidates)

    # ---- read-only views ----

    @property
    def length(self) -> int:
        """The fixed password length L for this session."""
        return self._length

    @property
    def history(self) -> Tuple[Observation, ...]:
        return tuple(self._history)

    @property
    def is_solved(self) -> bool:
        return len(self._passwords) == 1

    @property
    def is_stuck(self) -> bool:
        """True after a contradiction emptied the pool."""
        return not self._passwords

    def view(self) -> Tuple[str, ...]:
        """Current candidates in insertion order."""
        return tuple(self._passwords)

    def answer(self) -> str:
        if len(self._passwords) != 1:
            raise Unsolved(len(self._passwords))
        return self._passwords[0]

    def __len__(self) -> int:
        return len(self._passwords)

    def __iter__(self) -> Iterator[str]:
        return iter(self.view())

    def __contains__(self, word: object) -> bool:
        return word in self._passwords

    def __repr__(self) -> str:
        return f"CandidatePool(size={len(self)}, length={self._length})"

    # ---- mutation ----

    def eliminate(self, guess: str, feedback: int) -> EliminationOutcome:
        """
        Keep exactly the candidates p with score(guess, p) == feedback.

        `guess` may be any string of length L; it does not have to be a
        current candidate. Raises LengthMismatch / InvalidFeedback without
        touching the pool.
        """
        if len(guess) != self._length:
            raise LengthMismatch(guess, self._length)
        validate_feedback(guess, feedback, self._length)

        before = len(self._passwords)
        self._passwords = filter_candidates(self._passwords, [(guess, feedback)])
        self._history.append(Observation(guess, feedback))
        logger.debug("guess %s likeness=%d: %d -> %d candidates",
                     guess, feedback, before, len(self._passwords))

        return outcome_for(self._passwords, guess, feedback)

    def remove(self, password: str) -> EliminationOutcome:
        """Strike one candidate by hand (e.g. a dud already ruled out)."""
        try:
            i = self._passwords.index(password)
        except ValueError:
            raise NotPresent(password) from None
        del self._passwords[i]
        logger.debug("removed %s: %d candidates remain", password, len(self._passwords))
        return outcome_for(self._passwords, password, None)
