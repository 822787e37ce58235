"""Core type definitions for objcollection."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from pydantic import BaseModel

from objcollection.core.record.models import Record

RawEntry: TypeAlias = Record | Mapping[str, Any] | BaseModel
"""Anything that can be normalized into a Record on entry."""

Predicate: TypeAlias = Callable[[Any, Record, Any], Any]
"""find() callback: (field value, whole record, args) -> truthy to keep."""

Comparator: TypeAlias = Callable[..., int]
"""sort() callback: (a, b) or (a, b, args) -> negative, zero or positive."""
