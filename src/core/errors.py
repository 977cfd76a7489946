"""
Errors — Constant-Term Recovery Exception Taxonomy

Two families, never mixed:

- InputValidationError (ValueError): malformed input. Usage error, the caller
  should report it and move on.
- ArithmeticInvariantViolation (ArithmeticError): an internal inconsistency.
  Treated as a defect, never as bad input.

Every exception keeps its diagnostic context (offending key, character,
value, ...) as attributes so that callers never need to re-derive state.
"""

from typing import Any, Optional


class ConstantTermError(Exception):
    """Base class for every error raised by the package."""


# =============================================================================
# INPUT VALIDATION
# =============================================================================


class InputValidationError(ConstantTermError, ValueError):
    """Input could not be turned into a valid point set."""


# --- Parse-time ---------------------------------------------------------------


class InvalidBase(InputValidationError):
    """Base is not an integer in [2, 36]."""

    def __init__(self, base: Any):
        self.base = base
        super().__init__(
            f"Invalid base {base!r}. Supported bases are integers between 2 and 36."
        )


class EmptyValue(InputValidationError):
    """Value string is empty, or empty once sign and separators are stripped."""

    def __init__(self, text: str, reason: str = "empty value string"):
        self.text = text
        super().__init__(f"Invalid numeric string {text!r}: {reason}.")


class InvalidCharacter(InputValidationError):
    """A character is not a digit of the requested base."""

    def __init__(self, char: str, base: int, text: str):
        self.char = char
        self.base = base
        self.text = text
        super().__init__(f"Invalid character {char!r} for base {base} in value {text!r}.")


# --- Record shape -------------------------------------------------------------


class MissingK(InputValidationError):
    """Record has no keys.k field."""

    def __init__(self):
        super().__init__('Missing "keys.k" in input record.')


class InvalidK(InputValidationError):
    """keys.k is not a positive integer."""

    def __init__(self, k: Any):
        self.k = k
        super().__init__(f"Invalid keys.k: expected positive integer, got {k!r}.")


class InvalidPointKey(InputValidationError):
    """A point key is not an integer string."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f'Invalid point key "{key}". Point keys must be integer strings like "1", "2", ...'
        )


class InvalidPointEntry(InputValidationError):
    """A point entry is not an object holding both value and base."""

    def __init__(self, key: str, detail: Optional[str] = None):
        self.key = key
        self.detail = detail
        message = f"Invalid point entry for key {key}. Must be object with 'value' and 'base'."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidValueType(InputValidationError):
    """A point value is neither a string nor a number nor a boolean."""

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(
            f"Invalid type for 'value' at key {key}: expected string, number or boolean, "
            f"got {type(value).__name__}."
        )


class MalformedInput(InputValidationError):
    """Raw text does not hold a JSON object."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


# --- Set construction ---------------------------------------------------------


class InsufficientPoints(InputValidationError):
    """Fewer points than keys.k."""

    def __init__(self, k: int, available: int):
        self.k = k
        self.available = available
        super().__init__(
            f"Not enough data points: keys.k = {k}, but only found {available} points."
        )


class DuplicateX(InputValidationError):
    """Two selected points share the same x."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate x value among selected points: x = {x}.")


# =============================================================================
# ARITHMETIC INVARIANTS
# =============================================================================


class ArithmeticInvariantViolation(ConstantTermError, ArithmeticError):
    """
    Exact arithmetic reached a state that correct input can never produce.

    Signals a defect in the computation, not a usage error.
    """


class ZeroDenominator(ArithmeticInvariantViolation, ZeroDivisionError):
    """Fraction reduction was asked to reduce n/0."""

    def __init__(self, numerator: int):
        self.numerator = numerator
        super().__init__(f"Zero denominator in fraction reduction ({numerator}/0).")


class DegenerateDenominator(ArithmeticInvariantViolation):
    """Interpolation finished with a zero denominator."""

    def __init__(self, numerator: int):
        self.numerator = numerator
        super().__init__(f"Final denominator is zero (numerator {numerator}).")
