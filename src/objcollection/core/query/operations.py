"""Query operations: call-form dispatch and loose equality."""

from __future__ import annotations

import math
import re
from fractions import Fraction
from typing import Any

from objcollection.core.query.models import (
    UNSET,
    FieldEquals,
    FieldMatches,
    HasField,
    RecordQuery,
)

_NUMERIC_STRING = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")
_INTEGER_STRING = re.compile(r"[+-]?\d+")


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _number_equals_string(number: int | float, text: str) -> bool:
    # NaN and infinities never equal a string
    if isinstance(number, float) and not math.isfinite(number):
        return False
    if not _NUMERIC_STRING.fullmatch(text):
        return str(number) == text

    literal = text.strip()
    if isinstance(number, float):
        return number == float(literal)
    if _INTEGER_STRING.fullmatch(literal):
        return number == int(literal)
    return Fraction(number) == Fraction(literal)


def loose_equals(left: Any, right: Any) -> bool:
    """Compare two values allowing numeric/string coercion.

    A number and a numeric string compare by value (`1 == "1"`,
    `1.5 == " 1.5 "`). Integers compare exactly, never through float. A number
    and a non-numeric string compare as strings. NaN and infinities never
    equal a string. Booleans are not coerced. Everything else falls back to `==`.

    Args:
        left: Value found on the record.
        right: Value being searched for.

    Returns:
        True if the values are loosely equal.
    """
    if _is_number(left) and isinstance(right, str):
        return _number_equals_string(left, right)
    if isinstance(left, str) and _is_number(right):
        return _number_equals_string(right, left)
    return bool(left == right)


def build_query(name: str | RecordQuery, param: Any = UNSET, args: Any = None) -> RecordQuery:
    """Convert find() call forms to a RecordQuery.

    Handles multiple input formats:
    - (query,) -> passthrough for a prebuilt HasField/FieldEquals/FieldMatches
    - (name,) -> HasField
    - (name, callable[, args]) -> FieldMatches
    - (name, literal) -> FieldEquals, including a literal None

    Args:
        name: Field name or prebuilt query.
        param: Literal to compare against or predicate; omitted for presence.
        args: Extra payload passed to a predicate.

    Returns:
        Normalized RecordQuery.

    Raises:
        TypeError: If the call form is not recognized.
    """
    if isinstance(name, HasField | FieldEquals | FieldMatches):
        if param is not UNSET:
            raise TypeError("find() takes no further arguments with a prebuilt query")
        return name
    if not isinstance(name, str):
        raise TypeError(f"Field name must be a string, got {type(name).__name__}")
    if param is UNSET:
        return HasField(name)
    if callable(param):
        return FieldMatches(name, param, args)
    return FieldEquals(name, param)
