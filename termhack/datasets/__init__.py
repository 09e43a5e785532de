from .validator import validate_candidates, pretty_summary
from .io import read_candidates, read_candidates_stream

__all__ = [
    "validate_candidates", "pretty_summary", "read_candidates", "read_candidates_stream",
]
