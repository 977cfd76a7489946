"""
Batch Runner — Many Sources, Independent Results

Processes every matching file of a directory in lexical filename order.
Each source is computed on its own: a failure is recorded on that source's
outcome and the batch moves on. Output is reproducible across runs.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.errors import ArithmeticInvariantViolation, ConstantTermError
from src.io.loader import load_record_file
from src.settings import settings
from src.solver import solve_record

logger = logging.getLogger("constant_term.batch")


# =============================================================================
# OUTCOME MODEL
# =============================================================================


class BatchOutcome(BaseModel):
    """
    Result of one batch source.

    Exactly one of result / error is set.
    """

    source: str = Field(..., min_length=1, description="Source identifier (file name)")
    result: Optional[str] = Field(None, description="Formatted constant term")
    error: Optional[str] = Field(None, description="Failure message")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_exclusive(self) -> "BatchOutcome":
        if (self.result is None) == (self.error is None):
            raise ValueError("exactly one of result / error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.ok:
            return f"{self.source} => {self.result}"
        return f"{self.source} => ERROR: {self.error}"


# =============================================================================
# SOURCE DISCOVERY
# =============================================================================


def is_batch_source(path: Path) -> bool:
    """Whether a directory entry takes part in the batch."""
    if not path.is_file():
        return False
    if settings.batch_skip_hidden and path.name.startswith("."):
        return False
    if path.name in settings.batch_excluded_names:
        return False
    return path.name.lower().endswith(settings.batch_suffix.lower())


def iter_batch_sources(directory: Path) -> Iterator[Path]:
    """Matching files of directory, sorted by file name."""
    for path in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if is_batch_source(path):
            yield path


# =============================================================================
# RUNNER
# =============================================================================


def process_source(path: Path) -> BatchOutcome:
    """Compute one source; input and I/O failures become an error outcome."""
    try:
        result = solve_record(load_record_file(path)).format()
    except ArithmeticInvariantViolation as e:
        logger.error("%s hit an arithmetic defect: %s", path.name, e)
        return BatchOutcome(source=path.name, error=str(e))
    except (ConstantTermError, OSError, UnicodeDecodeError) as e:
        logger.warning("%s failed: %s", path.name, e)
        return BatchOutcome(source=path.name, error=str(e))
    return BatchOutcome(source=path.name, result=result)


def run_batch(directory: Path) -> List[BatchOutcome]:
    """
    Process every batch source of directory.

    Args:
        directory: Directory to scan

    Returns:
        One outcome per source, in file name order (empty if none match)

    Raises:
        OSError: if the directory itself cannot be read
    """
    outcomes = [process_source(path) for path in iter_batch_sources(directory)]
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info(
        "batch %s: %d sources, %d failed", directory, len(outcomes), failed
    )
    return outcomes
