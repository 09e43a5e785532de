from .errors import (
    HackError, LengthMismatch, InvalidFeedback, InvalidPassword,
    EmptyCandidateSet, NothingToRecommend, NotPresent, Unsolved,
)
from .scoring import score, likeness_matrix
from .constraints import filter_candidates, is_consistent
from .validation import validate_password, validate_feedback
from .outcomes import Narrowed, Solved, Contradiction, EliminationOutcome
from .pool import CandidatePool, Observation

__all__ = [
    "score", "likeness_matrix", "filter_candidates", "is_consistent",
    "validate_password", "validate_feedback",
    "Narrowed", "Solved", "Contradiction", "EliminationOutcome",
    "CandidatePool", "Observation",
    "HackError", "LengthMismatch", "InvalidFeedback", "InvalidPassword",
    "EmptyCandidateSet", "NothingToRecommend", "NotPresent", "Unsolved",
]
