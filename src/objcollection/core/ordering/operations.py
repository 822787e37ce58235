"""Ordering operations: natural comparison and sort keys."""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import Any, Literal

from objcollection.core.errors import InvalidCallbackError, MissingFieldError
from objcollection.core.ordering.models import ComparatorOrder, FieldOrder, OrderSpec, Unordered
from objcollection.core.record.models import Record


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _digit_run_end(text: str, pos: int) -> int:
    while pos < len(text) and _is_digit(text[pos]):
        pos += 1
    return pos


def natural_compare(a: str, b: str, *, case_sensitive: bool = True) -> int:
    """Compare strings so that embedded numbers order by value.

    Whitespace is ignored, runs of ASCII digits compare as integers and all
    other characters compare by code point. When one string runs out first
    it sorts first. So "2" < "10" < "a" < "b" and "img2" < "img10".

    Args:
        a: First string.
        b: Second string.
        case_sensitive: If False, both strings are casefolded first.

    Returns:
        -1, 0 or 1.
    """
    if not case_sensitive:
        a, b = a.casefold(), b.casefold()

    i = j = 0
    while True:
        i = _skip_spaces(a, i)
        j = _skip_spaces(b, j)
        if i >= len(a) or j >= len(b):
            break

        if _is_digit(a[i]) and _is_digit(b[j]):
            end_a = _digit_run_end(a, i)
            end_b = _digit_run_end(b, j)
            digits_a = a[i:end_a].lstrip("0")
            digits_b = b[j:end_b].lstrip("0")
            # Without leading zeros, a longer run is a larger number
            key_a, key_b = (len(digits_a), digits_a), (len(digits_b), digits_b)
            if key_a != key_b:
                return -1 if key_a < key_b else 1
            i, j = end_a, end_b
            continue

        if a[i] != b[j]:
            return -1 if a[i] < b[j] else 1
        i += 1
        j += 1

    rest_a, rest_b = len(a) - i, len(b) - j
    return (rest_a > rest_b) - (rest_a < rest_b)


def stringify(value: Any) -> str:
    """String form used for natural ordering. None and False are empty."""
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def normalize_order(param: Any, args: Any = None) -> OrderSpec:
    """Convert sort() call forms to an OrderSpec.

    Handles multiple input formats:
    - FieldOrder/ComparatorOrder/Unordered -> passthrough
    - callable -> ComparatorOrder(param, args)
    - non-empty string -> FieldOrder
    - None, empty string or other falsy value -> Unordered

    Args:
        param: Comparator, field name or prebuilt order.
        args: Extra payload passed to a comparator.

    Returns:
        Normalized OrderSpec.

    Raises:
        InvalidCallbackError: If param is neither callable nor a field name.
    """
    if isinstance(param, FieldOrder | ComparatorOrder | Unordered):
        return param
    if callable(param):
        return ComparatorOrder(param, args)
    if not param:
        return Unordered()
    if isinstance(param, str):
        return FieldOrder(param)
    raise InvalidCallbackError(
        f"sort() expects a comparator or a field name, got {type(param).__name__}"
    )


def sort_key(
    order: FieldOrder | ComparatorOrder,
    records: list[Record],
    *,
    missing_field: Literal["raise", "none"] = "raise",
    case_sensitive: bool = True,
) -> Callable[[Record], Any]:
    """Build a sort key for list.sort() from an order.

    For a FieldOrder every record is checked up front, so a missing field
    raises before anything is reordered.

    Args:
        order: Ordering to apply.
        records: Records about to be sorted.
        missing_field: "raise" or "none" (treat missing as None).
        case_sensitive: Case sensitivity of natural comparison.

    Returns:
        Key function suitable for sorted()/list.sort().

    Raises:
        MissingFieldError: If a record lacks the field and missing_field is "raise".
    """
    if isinstance(order, ComparatorOrder):
        return cmp_to_key(order.compare)

    name = order.name
    if missing_field == "raise":
        for index, record in enumerate(records):
            if name not in record:
                raise MissingFieldError(name, index)

    def compare(a: Record, b: Record) -> int:
        return natural_compare(
            stringify(a.get(name)), stringify(b.get(name)), case_sensitive=case_sensitive
        )

    return cmp_to_key(compare)
