"""
Batch processing of input record files.
"""

from src.batch.runner import (
    BatchOutcome,
    is_batch_source,
    iter_batch_sources,
    process_source,
    run_batch,
)

__all__ = [
    "BatchOutcome",
    "is_batch_source",
    "iter_batch_sources",
    "process_source",
    "run_batch",
]
