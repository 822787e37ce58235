"""Record normalization: the only boundary conversion of the package."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from objcollection.core.errors import InvalidRecordError
from objcollection.core.record.models import Record


def is_raw_entry(value: Any) -> bool:
    """Check if value is a single entry rather than a batch of entries."""
    return isinstance(value, Mapping | BaseModel)


def normalize_record(entry: Any) -> Record:
    """Convert an entry into a Record.

    Handles multiple input formats:
    - Record -> passthrough (same object, identity preserved)
    - Mapping -> new Record with the same items (shallow)
    - pydantic BaseModel -> new Record from model_dump()

    Args:
        entry: Entry to normalize.

    Returns:
        Record for the entry.

    Raises:
        InvalidRecordError: If entry is not a recognized record format.
    """
    if isinstance(entry, Record):
        return entry
    if isinstance(entry, Mapping):
        return Record(entry)
    if isinstance(entry, BaseModel):
        return Record(entry.model_dump())
    raise InvalidRecordError(
        f"Cannot convert {type(entry).__name__} to a record; expected a mapping or Record"
    )


def normalize_records(entries: Iterable[Any]) -> list[Record]:
    """Normalize every entry, failing as a whole if any entry is invalid."""
    return [normalize_record(entry) for entry in entries]
