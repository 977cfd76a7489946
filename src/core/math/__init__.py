"""
Core math modules

Exact integer and rational primitives: base-N parsing, fraction reduction,
Lagrange evaluation at x = 0.
"""

# Base-N parsing
from src.core.math.base_n import (
    BASE_MAX,
    BASE_MIN,
    DIGIT_VALUES,
    DIGITS,
    format_base_n,
    parse_base_n,
    validate_base,
)

# Fraction reduction
from src.core.math.rational import add_fractions, gcd, reduce_fraction

# Lagrange evaluation
from src.core.math.lagrange import constant_term, lagrange_term

__all__ = [
    # Base-N — Constants
    "BASE_MAX",
    "BASE_MIN",
    "DIGITS",
    "DIGIT_VALUES",
    # Base-N — Functions
    "format_base_n",
    "parse_base_n",
    "validate_base",
    # Rational
    "add_fractions",
    "gcd",
    "reduce_fraction",
    # Lagrange
    "constant_term",
    "lagrange_term",
]
