"""
Contract Validation Module

JSON Schema contracts for the input record.
"""

from .validators import (
    ContractValidator,
    PointEntryValidator,
    SchemaLoader,
    validate_point_entry,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PointEntryValidator",
    # Functions
    "validate_point_entry",
]
