"""
Point Set Builder — Input Record → Selected Points

Turns a loosely structured input record into the k points used for
interpolation:

    {
      "keys": {"k": 3},
      "1": {"value": "11", "base": 2},
      "2": {"value": "ff", "base": 16},
      ...
    }

PIPELINE:
1. keys.k        → MissingK / InvalidK
2. point keys    → InvalidPointKey (must be ^[+-]?\\d+$, parsed base 10 as x)
3. point entries → InvalidPointEntry / InvalidValueType (point_entry.json)
4. values        → y via parse_base_n(value, trunc(base))
5. count         → InsufficientPoints
6. sort by x, keep the first k, scan neighbours → DuplicateX

Selection depends on x only, never on record key order.
"""

import logging
import math
import re
from typing import Any, Final, List, Mapping

from src.core.contracts import PointEntryValidator
from src.core.domain.point import Point, PointSet
from src.core.errors import (
    DuplicateX,
    InsufficientPoints,
    InvalidBase,
    InvalidK,
    InvalidPointEntry,
    InvalidPointKey,
    InvalidValueType,
    MissingK,
)
from src.core.math.base_n import parse_base_n

logger = logging.getLogger("constant_term.points")

KEYS_FIELD: Final[str] = "keys"
K_FIELD: Final[str] = "k"

POINT_KEY_PATTERN: Final[re.Pattern] = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN: Final[re.Pattern] = re.compile(r"\s*([+-]?[0-9]+)")

_ENTRY_VALIDATOR = PointEntryValidator()


# =============================================================================
# FIELD COERCION
# =============================================================================


def read_k(record: Mapping[str, Any]) -> int:
    """
    Extract keys.k as a positive int.

    Accepted forms: int, integral float, decimal string. bool is rejected.

    Raises:
        MissingK: if keys or keys.k is absent
        InvalidK: if k is not a positive integer
    """
    keys = record.get(KEYS_FIELD)
    if not isinstance(keys, Mapping) or K_FIELD not in keys:
        raise MissingK()

    raw = keys[K_FIELD]
    if isinstance(raw, bool):
        raise InvalidK(raw)

    if isinstance(raw, int):
        k = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw) or not raw.is_integer():
            raise InvalidK(raw)
        k = int(raw)
    elif isinstance(raw, str) and re.fullmatch(r"\s*[+]?[0-9]+\s*", raw):
        k = int(raw)
    else:
        raise InvalidK(raw)

    if k <= 0:
        raise InvalidK(raw)
    return k


def parse_point_key(key: str) -> int:
    """Parse a record key as a base-10 x-coordinate."""
    if not isinstance(key, str) or not POINT_KEY_PATTERN.fullmatch(key):
        raise InvalidPointKey(key)
    try:
        return int(key)
    except ValueError:
        raise InvalidPointKey(key) from None


def value_to_text(value: Any, key: str = "") -> str:
    """
    Decimal string form of a point value.

    Strings pass through; booleans become "true"/"false"; integral floats
    render without a fractional part (5.0 → "5"); other finite floats keep
    their repr, which the base-N parser then rejects on ".".

    Raises:
        InvalidValueType: for NaN and infinities
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidValueType(key, value)
        if value.is_integer():
            return str(int(value))
    return repr(value)


def coerce_base(base: Any) -> int:
    """
    Truncate a base field to an int.

    int → as is; float → truncated; str → leading decimal integer
    ("16", " 16", "16.9" → 16). Range is checked by the parser.

    Raises:
        InvalidBase: if nothing integral can be read
    """
    if isinstance(base, bool):
        raise InvalidBase(base)
    if isinstance(base, int):
        return base
    if isinstance(base, float):
        if not math.isfinite(base):
            raise InvalidBase(base)
        return math.trunc(base)
    if isinstance(base, str):
        match = _DECIMAL_PATTERN.match(base)
        if match:
            return int(match.group(1))
    raise InvalidBase(base)


def check_entry(key: str, entry: Any) -> None:
    """
    Validate one point entry against point_entry.json.

    Raises:
        InvalidPointEntry: entry is not an object or lacks value/base
        InvalidValueType: value is not a string, number or boolean
    """
    for error in _ENTRY_VALIDATOR.iter_errors(entry):
        if list(error.path) == ["value"]:
            raise InvalidValueType(key, entry.get("value"))
        raise InvalidPointEntry(key, error.message)


# =============================================================================
# BUILDER
# =============================================================================


def extract_points(record: Mapping[str, Any]) -> List[Point]:
    """Parse every point entry of the record, in record order."""
    points: List[Point] = []
    for key, entry in record.items():
        if key == KEYS_FIELD:
            continue
        x = parse_point_key(key)
        check_entry(key, entry)
        y = parse_base_n(value_to_text(entry["value"], key), coerce_base(entry["base"]))
        points.append(Point(x=x, y=y))
    return points


def select_points(points: List[Point], k: int) -> tuple[Point, ...]:
    """
    Lowest-k points by x.

    Raises:
        InsufficientPoints: if len(points) < k
        DuplicateX: if two of the selected points share x
    """
    if len(points) < k:
        raise InsufficientPoints(k, len(points))

    selected = tuple(sorted(points, key=lambda p: p.x)[:k])
    for previous, current in zip(selected, selected[1:]):
        if previous.x == current.x:
            raise DuplicateX(current.x)
    return selected


def build_point_set(record: Mapping[str, Any]) -> PointSet:
    """
    Build the selected point set from an input record.

    Args:
        record: Parsed input record (see module docstring)

    Returns:
        PointSet with exactly k points, ascending and distinct in x

    Raises:
        MissingK, InvalidK, InvalidPointKey, InvalidPointEntry,
        InvalidValueType, InvalidBase, EmptyValue, InvalidCharacter,
        InsufficientPoints, DuplicateX
    """
    k = read_k(record)
    points = extract_points(record)
    selected = select_points(points, k)
    logger.debug(
        "selected %d of %d points, x=%s", k, len(points), [p.x for p in selected]
    )
    return PointSet(k=k, points=selected, total_available=len(points))
