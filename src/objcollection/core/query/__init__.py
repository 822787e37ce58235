"""Query functionality: record selection variants and dispatch."""

from objcollection.core.query.models import (
    UNSET,
    FieldEquals,
    FieldMatches,
    HasField,
    RecordQuery,
)
from objcollection.core.query.operations import build_query, loose_equals

__all__ = [
    # Models
    "UNSET",
    "HasField",
    "FieldEquals",
    "FieldMatches",
    "RecordQuery",
    # Operations
    "build_query",
    "loose_equals",
]
