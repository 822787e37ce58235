"""Record model: the attribute bag stored in a collection.

Usage:
    task = Record(name="build", priority=2)
    task.priority += 1
    assert task["priority"] == 3
    assert "owner" not in task
"""

from __future__ import annotations

from typing import Any


class Record(dict[str, Any]):
    """Mapping of field name to value with attribute-style access.

    Field presence is `name in record`. Two records with equal fields
    compare equal, but collections track records by identity.

    Attribute reads only reach fields whose names are not dict attributes.
    `record.items = 5` stores a field, but `record.items` still returns the
    dict method; read such fields with `record["items"]`. The same holds for
    `keys`, `values`, `get`, `copy`, `pop`, `update` and the rest.
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"Record has no field {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(f"Record has no field {name!r}") from None

    def copy(self) -> Record:
        """Shallow copy that stays a Record."""
        return Record(self)

    def __repr__(self) -> str:
        return f"Record({dict.__repr__(self)})"
