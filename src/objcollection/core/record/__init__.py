"""Record model and normalization."""

from objcollection.core.record.models import Record
from objcollection.core.record.operations import (
    is_raw_entry,
    normalize_record,
    normalize_records,
)

__all__ = [
    # Models
    "Record",
    # Operations
    "is_raw_entry",
    "normalize_record",
    "normalize_records",
]
