"""Ordering functionality: sort variants and natural comparison."""

from objcollection.core.ordering.models import ComparatorOrder, FieldOrder, OrderSpec, Unordered
from objcollection.core.ordering.operations import (
    natural_compare,
    normalize_order,
    sort_key,
    stringify,
)

__all__ = [
    # Models
    "FieldOrder",
    "ComparatorOrder",
    "Unordered",
    "OrderSpec",
    # Operations
    "natural_compare",
    "normalize_order",
    "sort_key",
    "stringify",
]
