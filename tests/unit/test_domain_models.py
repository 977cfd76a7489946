"""
Tests for domain models

- Point: strict, immutable
- PointSet: k / ordering / distinctness invariants
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Fraction, Point, PointSet


class TestPoint:
    """Tests for Point"""

    def test_big_coordinates(self) -> None:
        p = Point(x=-(10**40), y=2**300)
        assert p.x == -(10**40)
        assert p.y == 2**300

    def test_immutable(self) -> None:
        p = Point(x=1, y=2)
        with pytest.raises(ValidationError):
            p.x = 5

    def test_strict(self) -> None:
        with pytest.raises(ValidationError):
            Point(x="1", y=2)
        with pytest.raises(ValidationError):
            Point(x=1.0, y=2)

    def test_hashable_and_equal(self) -> None:
        assert Point(x=1, y=2) == Point(x=1, y=2)
        assert len({Point(x=1, y=2), Point(x=1, y=2)}) == 1


class TestPointSet:
    """Tests for PointSet"""

    def test_valid(self) -> None:
        ps = PointSet(k=2, points=(Point(x=1, y=1), Point(x=4, y=2)), total_available=3)
        assert ps.xs == (1, 4)

    def test_wrong_count(self) -> None:
        with pytest.raises(ValidationError):
            PointSet(k=3, points=(Point(x=1, y=1),), total_available=3)

    def test_not_ascending(self) -> None:
        with pytest.raises(ValidationError):
            PointSet(k=2, points=(Point(x=4, y=1), Point(x=1, y=2)), total_available=2)

    def test_duplicate_x(self) -> None:
        with pytest.raises(ValidationError):
            PointSet(k=2, points=(Point(x=1, y=1), Point(x=1, y=2)), total_available=2)

    def test_total_below_k(self) -> None:
        with pytest.raises(ValidationError):
            PointSet(k=1, points=(Point(x=1, y=1),), total_available=0)

    def test_k_positive(self) -> None:
        with pytest.raises(ValidationError):
            PointSet(k=0, points=(), total_available=0)


class TestFractionExport:
    def test_exported(self) -> None:
        assert Fraction(numerator=1, denominator=1).is_integer
