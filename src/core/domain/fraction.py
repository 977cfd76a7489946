"""
Fraction — Exact Rational Value

Immutable Pydantic model for a rational number in lowest terms.
Instances are produced by src.core.math.rational.reduce_fraction; the model
validator rejects anything that is not already normalized, so a partially
updated Fraction can never exist.
"""

import math

from pydantic import BaseModel, Field, model_validator


class Fraction(BaseModel):
    """
    Reduced fraction numerator/denominator.

    Invariant: denominator > 0 and gcd(|numerator|, denominator) == 1
    (zero is stored as 0/1).
    """

    numerator: int = Field(..., description="Signed numerator")
    denominator: int = Field(..., gt=0, description="Strictly positive denominator")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def check_lowest_terms(self) -> "Fraction":
        if math.gcd(self.numerator, self.denominator) != 1:
            raise ValueError(
                f"{self.numerator}/{self.denominator} is not in lowest terms"
            )
        return self

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def format(self) -> str:
        """
        Render as "n" when the denominator is 1, otherwise "n/d".

        Examples:
            >>> Fraction(numerator=3, denominator=1).format()
            '3'
            >>> Fraction(numerator=-1, denominator=2).format()
            '-1/2'
        """
        if self.is_integer:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Fraction(numerator={self.numerator}, denominator={self.denominator})"
