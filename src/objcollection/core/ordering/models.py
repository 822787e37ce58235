"""Ordering models for sort().

Usage:
    FieldOrder("name")                            # natural order on a field
    ComparatorOrder(lambda a, b: a["x"] - b["x"])  # explicit comparator
    ComparatorOrder(by_key, args="x")             # called as by_key(a, b, "x")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from objcollection.core.types import Comparator


@dataclass(frozen=True, slots=True)
class FieldOrder:
    """Natural string order on a field's stringified value."""

    name: str


@dataclass(frozen=True, slots=True)
class ComparatorOrder:
    """Order given by a two-argument comparator.

    When args is not None the comparator is called as comparator(a, b, args).
    """

    comparator: Comparator
    args: Any = None

    def compare(self, a: Any, b: Any) -> int:
        if self.args is None:
            return self.comparator(a, b)
        return self.comparator(a, b, self.args)


@dataclass(frozen=True, slots=True)
class Unordered:
    """No ordering; sort() leaves the sequence untouched."""

    pass


OrderSpec = FieldOrder | ComparatorOrder | Unordered
