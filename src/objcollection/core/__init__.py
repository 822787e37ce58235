"""Core functionalities: stateless models and operations.

Architecture Note:
    core/ contains pure, stateless building blocks: the record model, query
    and ordering variants, and the error hierarchy. The stateful container
    lives in collection/.
"""

from objcollection.core.errors import (
    CollectionError,
    IndexOutOfRangeError,
    InvalidCallbackError,
    InvalidRecordError,
    MissingFieldError,
)
from objcollection.core.ordering import (
    ComparatorOrder,
    FieldOrder,
    OrderSpec,
    Unordered,
    natural_compare,
    normalize_order,
)
from objcollection.core.query import (
    UNSET,
    FieldEquals,
    FieldMatches,
    HasField,
    RecordQuery,
    build_query,
    loose_equals,
)
from objcollection.core.record import Record, is_raw_entry, normalize_record, normalize_records
from objcollection.core.types import Comparator, Predicate, RawEntry

__all__ = [
    # Types
    "RawEntry",
    "Predicate",
    "Comparator",
    # Errors
    "CollectionError",
    "IndexOutOfRangeError",
    "InvalidCallbackError",
    "InvalidRecordError",
    "MissingFieldError",
    # Record
    "Record",
    "is_raw_entry",
    "normalize_record",
    "normalize_records",
    # Query
    "UNSET",
    "HasField",
    "FieldEquals",
    "FieldMatches",
    "RecordQuery",
    "build_query",
    "loose_equals",
    # Ordering
    "FieldOrder",
    "ComparatorOrder",
    "Unordered",
    "OrderSpec",
    "natural_compare",
    "normalize_order",
]
