"""Error hierarchy for collection operations.

Every error derives from CollectionError and from the builtin exception a
caller would naturally expect, so `except IndexError` keeps working:

    try:
        people.eq(10)
    except IndexError:
        ...
"""

from __future__ import annotations


class CollectionError(Exception):
    """Base class for all collection errors."""

    pass


class IndexOutOfRangeError(CollectionError, IndexError):
    """Raised when a position is outside the collection bounds."""

    def __init__(self, index: int, count: int, operation: str):
        self.index = index
        self.count = count
        self.operation = operation
        super().__init__(f"{operation}(): index {index} out of range for collection of {count}")


class InvalidCallbackError(CollectionError, TypeError):
    """Raised when a non-callable is passed where a callback is required."""

    pass


class MissingFieldError(CollectionError, LookupError):
    """Raised when a record lacks a field an operation needs to read."""

    def __init__(self, field: str, index: int):
        self.field = field
        self.index = index
        super().__init__(f"Record at index {index} has no field {field!r}")

    def __str__(self) -> str:
        # LookupError would otherwise repr() the message
        return str(self.args[0])


class InvalidRecordError(CollectionError, TypeError):
    """Raised when an entry cannot be normalized into a Record."""

    pass
