"""
Error kinds raised by the engine.

Every error derives from HackError (a ValueError), so callers that only care
about "bad input" can catch one type. None of them leaves a pool half-updated:
validation always happens before mutation.
"""

from __future__ import annotations


class HackError(ValueError):
    """Base class for all termhack input/state errors."""


class LengthMismatch(HackError):
    def __init__(self, word: str, expected: int):
        self.word = word
        self.expected = expected
        super().__init__(
            f'"{word}" has {len(word)} characters; expected {expected}.'
        )


class InvalidFeedback(HackError):
    def __init__(self, guess: str, feedback, length: int):
        self.guess = guess
        self.feedback = feedback
        self.length = length
        super().__init__(
            f'"{guess}" cannot have {feedback} characters correct '
            f"(expected 0..{length})."
        )


class InvalidPassword(HackError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(
            f"{word!r} is not a usable password (must be non-empty, no whitespace)."
        )


class EmptyCandidateSet(HackError):
    def __init__(self):
        super().__init__("no candidate passwords supplied.")


class NothingToRecommend(HackError):
    def __init__(self, size: int):
        self.size = size
        if size == 1:
            msg = "only one candidate remains; nothing to recommend."
        else:
            msg = "no candidates remain; nothing to recommend."
        super().__init__(msg)


class NotPresent(HackError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f'"{word}" is not in the list of candidate passwords.')


class Unsolved(HackError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"password not deduced yet ({size} candidates remain).")
