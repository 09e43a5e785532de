"""
Input guards shared by the pool and the shell.

This module answers: "may this string / number enter the engine right now?"
Both functions raise instead of returning False, so the caller's state is
never touched by a rejected input.
"""

from __future__ import annotations

from .errors import InvalidFeedback, InvalidPassword, LengthMismatch


def validate_password(word: str, N: int | None = None) -> str:
    """
    Return `word` unchanged if it is a usable password of length N.

    Rules:
      - must be a non-empty str with no whitespace (the shell tokenizes on it)
      - if N is given, must have exactly N characters
    """
    if not isinstance(word, str) or not word or any(ch.isspace() for ch in word):
        raise InvalidPassword(word)
    if N is not None and len(word) != N:
        raise LengthMismatch(word, N)
    return word


def validate_feedback(guess: str, feedback: int, N: int) -> int:
    """Return `feedback` if it is an int in [0, N]."""
    # bool is an int subclass; True/False are not likeness values
    if isinstance(feedback, bool) or not isinstance(feedback, int):
        raise InvalidFeedback(guess, feedback, N)
    if not 0 <= feedback <= N:
        raise InvalidFeedback(guess, feedback, N)
    return feedback
