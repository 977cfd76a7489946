"""
Solver — End-to-End Constant-Term Recovery

    text → record → PointSet → Fraction → "n" | "n/d"
"""

from typing import Any, Mapping

from src.core.domain.fraction import Fraction
from src.core.math.lagrange import constant_term
from src.core.points.builder import build_point_set
from src.io.loader import load_record


def solve_record(record: Mapping[str, Any]) -> Fraction:
    """Exact constant term of an already parsed input record."""
    point_set = build_point_set(record)
    return constant_term(point_set.points, point_set.k)


def solve_text(text: str) -> str:
    """
    Formatted constant term of a raw JSON text.

    Examples:
        >>> solve_text('{"keys": {"k": 2}, "1": {"value": "5", "base": 10}, "2": {"value": "7", "base": 10}}')
        '3'
    """
    return solve_record(load_record(text)).format()
