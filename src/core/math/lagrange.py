"""
Lagrange — Exact Constant-Term Evaluation

Evaluates the unique degree-(k-1) polynomial through k points at x = 0,
entirely in reduced rationals.

FORMULAS:
    N_j = Π_{i≠j} (0 - x_i)
    D_j = Π_{i≠j} (x_j - x_i)
    P(0) = Σ_j y_j · N_j / D_j

Each term y_j·N_j/D_j is reduced as soon as it is formed, and the running
total is reduced after every addition, which bounds the size of the
intermediate integers.

CRITICAL INVARIANTS:
1. No floating point, no truncating division
2. Duplicate x among the k points → DuplicateX (checked here as well, the
   evaluator may be called without going through the point set builder)
3. A zero final denominator is a defect → DegenerateDenominator
4. Result denominator > 0
"""

import logging
from typing import Sequence

from src.core.domain.fraction import Fraction
from src.core.domain.point import Point
from src.core.errors import DegenerateDenominator, DuplicateX, InsufficientPoints, InvalidK
from src.core.math.rational import add_fractions, reduce_fraction

logger = logging.getLogger("constant_term.lagrange")


def lagrange_term(points: Sequence[Point], j: int, k: int) -> Fraction:
    """
    Reduced j-th summand y_j · N_j / D_j of the interpolation at x = 0.

    Raises:
        DuplicateX: if some x_i (i != j) equals x_j
    """
    xj = points[j].x
    numerator = 1
    denominator = 1
    for i in range(k):
        if i == j:
            continue
        xi = points[i].x
        if xi == xj:
            raise DuplicateX(xi)
        numerator *= -xi
        denominator *= xj - xi
    return reduce_fraction(points[j].y * numerator, denominator)


def constant_term(points: Sequence[Point], k: int) -> Fraction:
    """
    Exact value at x = 0 of the polynomial through the first k points.

    Args:
        points: At least k points; only points[0:k] are used
        k: Number of points (polynomial degree + 1)

    Returns:
        Reduced Fraction; denominator 1 when the constant term is an integer

    Raises:
        InvalidK: if k is not a positive int
        InsufficientPoints: if len(points) < k
        DuplicateX: if two of the first k points share x
        DegenerateDenominator: if the accumulated denominator ends up zero

    Examples:
        >>> pts = [Point(x=1, y=5), Point(x=2, y=7)]
        >>> constant_term(pts, 2).format()
        '3'
    """
    if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
        raise InvalidK(k)
    if len(points) < k:
        raise InsufficientPoints(k, len(points))

    total = Fraction(numerator=0, denominator=1)
    for j in range(k):
        total = add_fractions(total, lagrange_term(points, j, k))

    if total.denominator == 0:
        raise DegenerateDenominator(total.numerator)

    logger.debug("constant term over k=%d points: %s", k, total)
    return total

