"""Query models for selecting records.

Usage:
    # Field presence
    HasField("owner")

    # Field equals a literal (loose equality by default)
    FieldEquals("priority", 1)

    # Field passes a predicate
    FieldMatches("priority", lambda value, record, limit: value > limit, args=2)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from objcollection.core.record.models import Record
from objcollection.core.types import Predicate


class _Unset:
    """Marker for an omitted positional argument."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True, slots=True)
class HasField:
    """Records where the field is present, whatever its value."""

    name: str

    def matches(self, record: Record, *, loose: bool = True) -> bool:
        return self.name in record


@dataclass(frozen=True, slots=True)
class FieldEquals:
    """Records where the field equals a literal value.

    Records missing the field never match.
    """

    name: str
    value: Any

    def matches(self, record: Record, *, loose: bool = True) -> bool:
        if self.name not in record:
            return False
        # Late import to avoid circular dependency
        from objcollection.core.query.operations import loose_equals

        current = record[self.name]
        return loose_equals(current, self.value) if loose else bool(current == self.value)


@dataclass(frozen=True, slots=True)
class FieldMatches:
    """Records where predicate(field value, record, args) is truthy.

    The predicate is never called for records missing the field.
    """

    name: str
    predicate: Predicate
    args: Any = None

    def matches(self, record: Record, *, loose: bool = True) -> bool:
        if self.name not in record:
            return False
        return bool(self.predicate(record[self.name], record, self.args))


RecordQuery = HasField | FieldEquals | FieldMatches
