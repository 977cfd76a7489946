"""
Base-N — Arbitrary-Precision Integer Parsing

Converts signed strings written in any base 2..36 into Python ints.

Grammar:
    value := [ws] ["+" | "-"] digit ( digit | "_" )* [ws]
    digit := 0-9 | a-z | A-Z   (value < base)

"_" is a readability separator only; stripping it never changes the value.

Errors:
    InvalidBase       base is not an int in [2, 36]
    EmptyValue        nothing left to parse (empty, sign only, separators only)
    InvalidCharacter  character outside the alphabet or >= base
"""

from types import MappingProxyType
from typing import Final, Mapping

from src.core.errors import EmptyValue, InvalidBase, InvalidCharacter

# =============================================================================
# ALPHABET
# =============================================================================

BASE_MIN: Final[int] = 2
BASE_MAX: Final[int] = 36

DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Read-only, built once at import; safe to share between computations
DIGIT_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {char: index for index, char in enumerate(DIGITS)}
)

SEPARATOR: Final[str] = "_"


# =============================================================================
# VALIDATION
# =============================================================================


def validate_base(base: object) -> int:
    """
    Check that base is an integer in [BASE_MIN, BASE_MAX].

    Raises:
        InvalidBase: for non-int (bool included) or out-of-range bases
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if base < BASE_MIN or base > BASE_MAX:
        raise InvalidBase(base)
    return base


# =============================================================================
# PARSING
# =============================================================================


def parse_base_n(text: str, base: int) -> int:
    """
    Parse a signed base-N string into an int.

    Args:
        text: Digits over the first `base` symbols of 0-9a-z, case-insensitive,
              with optional leading sign and "_" separators
        base: Integer in [2, 36]

    Returns:
        Parsed value

    Raises:
        InvalidBase, EmptyValue, InvalidCharacter

    Examples:
        >>> parse_base_n("ff", 16)
        255
        >>> parse_base_n("-1_0000", 2)
        -16
        >>> parse_base_n("Zz", 36)
        1295
    """
    base = validate_base(base)
    if not isinstance(text, str):
        raise TypeError(f"value must be a string, got {type(text).__name__}")

    digits = text.strip()
    if not digits:
        raise EmptyValue(text)

    negative = False
    if digits[0] in "+-":
        negative = digits[0] == "-"
        digits = digits[1:]
        if not digits:
            raise EmptyValue(text, "only sign found")

    digits = digits.replace(SEPARATOR, "")
    if not digits:
        raise EmptyValue(text, "nothing left after removing separators")

    result = 0
    for char in digits:
        digit = DIGIT_VALUES.get(char.lower(), -1)
        if digit < 0 or digit >= base:
            raise InvalidCharacter(char, base, text)
        result = result * base + digit

    return -result if negative else result


def format_base_n(value: int, base: int) -> str:
    """
    Render an int in the same alphabet (lowercase, no separators).

    Inverse of parse_base_n for canonical strings.

    Examples:
        >>> format_base_n(255, 16)
        'ff'
        >>> format_base_n(-5, 2)
        '-101'
    """
    base = validate_base(base)
    if value == 0:
        return "0"

    magnitude = -value if value < 0 else value
    chars = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        chars.append(DIGITS[digit])
    if value < 0:
        chars.append("-")
    return "".join(reversed(chars))
