"""
Point set construction from input records.
"""

from src.core.points.builder import (
    build_point_set,
    coerce_base,
    extract_points,
    parse_point_key,
    read_k,
    select_points,
    value_to_text,
)

__all__ = [
    "build_point_set",
    "coerce_base",
    "extract_points",
    "parse_point_key",
    "read_k",
    "select_points",
    "value_to_text",
]
