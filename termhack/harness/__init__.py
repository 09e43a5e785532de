from .core import run_case, run_batch, TERMINAL_MAX_ATTEMPTS
from .io import write_csv, write_manifest, summarize_results, timestamp_id

__all__ = [
    "run_case", "run_batch", "write_csv", "write_manifest", "summarize_results",
    "timestamp_id", "TERMINAL_MAX_ATTEMPTS",
]
