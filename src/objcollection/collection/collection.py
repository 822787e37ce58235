"""Ordered collection of records.

Usage:
    people = Collection([{"name": "ann", "age": 31}, {"name": "bob"}])

    # Query
    adults = people.find("age", lambda age, record, limit: age >= limit, 18)
    with_age = people.find("age")

    # Bulk read/write
    people.set("active", True)
    names = people.get("name")

    # Positional mutation, chained
    people.add_at({"name": "cat"}, 0).remove_at().sort("name")

    # Early-exit iteration
    people.each(lambda record, index, args: record.name != "bob")

Not thread-safe: concurrent mutation needs external locking.
"""

from __future__ import annotations

import logging
import operator
import warnings
from collections.abc import Callable, Iterable, Iterator
from typing import Any, SupportsIndex, overload

from objcollection.config.settings import CollectionSettings, get_settings
from objcollection.core.errors import IndexOutOfRangeError, InvalidCallbackError, MissingFieldError
from objcollection.core.ordering import (
    FieldOrder,
    OrderSpec,
    Unordered,
    normalize_order,
    sort_key,
)
from objcollection.core.query import UNSET, RecordQuery, build_query
from objcollection.core.record import Record, is_raw_entry, normalize_record, normalize_records
from objcollection.core.types import Comparator, RawEntry

logger = logging.getLogger(__name__)


class Collection:
    """Mutable, ordered sequence of Records.

    Records are shared with the caller, never copied: structural changes
    (insert, remove, reorder) only touch the collection, while field writes
    through set() are visible to every holder of the same record.

    Args:
        data: Initial entries (Records, mappings or pydantic models).
        settings: Policy settings; defaults to the environment-loaded settings.
    """

    def __init__(
        self,
        data: Iterable[RawEntry] | None = None,
        *,
        settings: CollectionSettings | None = None,
    ):
        """Initialize collection.

        Args:
            data: Initial entries, normalized into Records.
            settings: Policy settings for this collection.

        Raises:
            InvalidRecordError: If any entry cannot be normalized.
        """
        self._settings = settings if settings is not None else get_settings()
        self._records: list[Record] = normalize_records(data) if data is not None else []

    @property
    def settings(self) -> CollectionSettings:
        return self._settings

    @staticmethod
    def _as_index(index: Any, operation: str) -> int:
        """Accept int and anything implementing __index__, except bool."""
        message = f"{operation}(): index must be an int, got {type(index).__name__}"
        if isinstance(index, bool):
            raise TypeError(message)
        try:
            return operator.index(index)
        except TypeError:
            raise TypeError(message) from None

    def _check_index(self, index: Any, operation: str) -> int:
        position = self._as_index(index, operation)
        if not 0 <= position < len(self._records):
            raise IndexOutOfRangeError(position, len(self._records), operation)
        return position

    # Read operations

    def eq(self, index: SupportsIndex) -> Record:
        """Get the record at a position.

        Args:
            index: 0-based position (int or any object with __index__).

        Returns:
            The live record, not a copy.

        Raises:
            IndexOutOfRangeError: If index is outside 0..count-1.
        """
        return self._records[self._check_index(index, "eq")]

    def find(self, name: str | RecordQuery, param: Any = UNSET, args: Any = None) -> Collection:
        """Select records into a new collection, preserving order.

        Call forms:
            find("owner")                          # field present
            find("owner", "ann")                   # field loosely equals literal
            find("age", predicate, args)           # predicate(value, record, args)
            find(FieldEquals("owner", "ann"))      # prebuilt query

        Records missing the field never match a literal or predicate; the
        predicate is not called for them.

        Returns:
            New Collection sharing the matched records.
        """
        query = build_query(name, param, args)
        loose = self._settings.loose_equality
        matched = [record for record in self._records if query.matches(record, loose=loose)]
        return Collection(matched, settings=self._settings)

    def get(self, name: str) -> list[Any]:
        """Read one field from every record, in order.

        Raises:
            MissingFieldError: If a record lacks the field and the missing_field
                policy is "raise". Under "none" the value reads as None.
        """
        if self._settings.missing_field == "none":
            return [record.get(name) for record in self._records]

        values = []
        for index, record in enumerate(self._records):
            if name not in record:
                raise MissingFieldError(name, index)
            values.append(record[name])
        return values

    def count(self) -> int:
        """Number of records."""
        return len(self._records)

    def to_list(self) -> list[Record]:
        """Shallow copy of the sequence; records are shared."""
        return list(self._records)

    # Mutations

    def set(self, name: str, value: Any) -> Collection:
        """Assign a field on every record, creating it where absent."""
        for record in self._records:
            record[name] = value
        return self

    def add_at(self, entry: RawEntry, index: SupportsIndex | None = None) -> Collection:
        """Insert one record.

        Args:
            entry: Record, mapping or pydantic model.
            index: Position to insert before. None or count appends, 0 prepends.

        Returns:
            This collection.

        Raises:
            InvalidRecordError: If entry cannot be normalized.
            IndexOutOfRangeError: If index is negative or past the tail and the
                insert_overflow policy is "raise".
        """
        position = None if index is None else self._as_index(index, "add_at")
        record = normalize_record(entry)
        size = len(self._records)

        if position is None or position == size:
            self._records.append(record)
        elif 0 <= position < size:
            self._records.insert(position, record)
        elif self._settings.insert_overflow == "append":
            logger.debug(
                "add_at(): index %d out of range for %d records, appending", position, size
            )
            self._records.append(record)
        else:
            raise IndexOutOfRangeError(position, size, "add_at")
        return self

    def merge(self, data: Collection | Iterable[RawEntry] | RawEntry) -> Collection:
        """Append many records at once.

        Handles multiple input formats:
        - Collection -> its records, same references, in order
        - iterable of entries -> each normalized, then appended in order
        - single entry (mapping, Record, model) -> add_at(data)

        An iterable is normalized completely before anything is appended,
        so an invalid entry leaves the collection unchanged.

        Returns:
            This collection.
        """
        if isinstance(data, Collection):
            batch = data.to_list()
        elif is_raw_entry(data) or isinstance(data, str | bytes) or not isinstance(data, Iterable):
            return self.add_at(data)
        else:
            batch = normalize_records(data)

        self._records.extend(batch)
        logger.debug("merge(): appended %d records, count now %d", len(batch), len(self._records))
        return self

    def remove_at(self, index: SupportsIndex | None = None) -> Collection:
        """Remove the record at a position, or the last one if omitted.

        Raises:
            IndexOutOfRangeError: If the collection is empty or index is out of range.
        """
        if index is None:
            if not self._records:
                raise IndexOutOfRangeError(-1, 0, "remove_at")
            index = len(self._records) - 1
        del self._records[self._check_index(index, "remove_at")]
        return self

    def remove(self, record: Any) -> Collection:
        """Remove every occurrence of this exact record (identity, not equality).

        A record that is not in the collection is ignored.
        """
        before = len(self._records)
        self._records = [item for item in self._records if item is not record]
        if len(self._records) != before:
            logger.debug("remove(): dropped %d occurrences", before - len(self._records))
        return self

    def sort(
        self,
        param: Comparator | str | OrderSpec | None,
        args: Any = None,
        *,
        reverse: bool = False,
    ) -> Collection:
        """Reorder records in place.

        Call forms:
            sort("name")                  # natural order on record["name"]
            sort(comparator)              # comparator(a, b) -> int
            sort(comparator, args)        # comparator(a, b, args) -> int
            sort(None) / sort("")         # no-op

        The sort is stable. The new order is computed before it replaces the
        current one, so a failing comparator leaves the collection unchanged.

        Raises:
            InvalidCallbackError: If param is neither callable nor a field name.
            MissingFieldError: If a record lacks the sort field and the
                missing_field policy is "raise".
        """
        order = normalize_order(param, args)
        if isinstance(order, Unordered):
            return self
        if isinstance(order, FieldOrder) and args is not None:
            warnings.warn(
                f"sort() ignores args when ordering by field {order.name!r}",
                stacklevel=2,
            )

        key = sort_key(
            order,
            self._records,
            missing_field=self._settings.missing_field,
            case_sensitive=self._settings.natural_case_sensitive,
        )
        self._records = sorted(self._records, key=key, reverse=reverse)
        logger.debug("sort(): reordered %d records by %r", len(self._records), order)
        return self

    # Iteration

    def each(self, callback: Callable[[Record, int, Any], Any], args: Any = None) -> Collection:
        """Call callback(record, index, args) for each record in order.

        Iteration stops as soon as a call returns exactly False; None and
        other falsy results continue. The records visited are those present
        when each() was called: the callback may add or remove records, and
        those changes apply to the collection without affecting this pass.

        Raises:
            InvalidCallbackError: If callback is not callable.
        """
        if not callable(callback):
            raise InvalidCallbackError(
                f"each() expects a callable, got {type(callback).__name__}"
            )

        for index, record in enumerate(list(self._records)):
            if callback(record, index, args) is False:
                break
        return self

    def __iter__(self) -> Iterator[Record]:
        """Iterate the live sequence; a fresh iterator sees current state."""
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> Collection: ...

    def __getitem__(self, index: int | slice) -> Record | Collection:
        if isinstance(index, slice):
            return Collection(self._records[index], settings=self._settings)
        return self.eq(index)

    def __contains__(self, record: object) -> bool:
        return any(item is record for item in self._records)

    def __repr__(self) -> str:
        return f"Collection({self._records!r})"
