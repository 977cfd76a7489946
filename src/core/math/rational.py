"""
Rational — Exact Fraction Reduction

Every Fraction handed out by this module is fully normalized:

CRITICAL INVARIANTS:
1. denominator > 0 (the sign lives on the numerator)
2. gcd(|numerator|, denominator) == 1
3. zero is always 0/1
4. reduce_fraction is idempotent

A zero denominator on entry is a defect of the caller → ZeroDenominator.
"""

from src.core.domain.fraction import Fraction
from src.core.errors import ZeroDenominator


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor via the iterative Euclidean algorithm.

    Operands are taken by absolute value. gcd(0, 0) == 0.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-7, 21)
        7
        >>> gcd(0, 5)
        5
    """
    a = -a if a < 0 else a
    b = -b if b < 0 else b
    while b != 0:
        a, b = b, a % b
    return a


def reduce_fraction(numerator: int, denominator: int) -> Fraction:
    """
    Reduce numerator/denominator to lowest terms.

    Args:
        numerator: Any integer
        denominator: Any non-zero integer

    Returns:
        Normalized Fraction (positive denominator, coprime parts)

    Raises:
        ZeroDenominator: if denominator == 0

    Examples:
        >>> reduce_fraction(6, -4)
        Fraction(numerator=-3, denominator=2)
        >>> reduce_fraction(0, -9)
        Fraction(numerator=0, denominator=1)
    """
    if denominator == 0:
        raise ZeroDenominator(numerator)

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    # gcd(0, d) == d, so zero collapses to 0/1
    g = gcd(numerator, denominator)
    return Fraction(numerator=numerator // g, denominator=denominator // g)


def add_fractions(left: Fraction, right: Fraction) -> Fraction:
    """
    Exact sum of two fractions by cross multiplication, reduced.

    (pN·tD + tN·pD) / (pD·tD)
    """
    numerator = left.numerator * right.denominator + right.numerator * left.denominator
    denominator = left.denominator * right.denominator
    return reduce_fraction(numerator, denominator)
