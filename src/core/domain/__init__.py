"""
Domain models and value objects.

Contains Point, PointSet and Fraction.
"""

from src.core.domain.fraction import Fraction
from src.core.domain.point import Point, PointSet

__all__ = [
    "Fraction",
    "Point",
    "PointSet",
]
