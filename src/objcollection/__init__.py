"""objcollection: ordered collections of loosely-typed records.

Usage:
    from objcollection import Collection

    tasks = Collection([
        {"name": "deploy", "priority": "2"},
        {"name": "build", "priority": 10},
    ])

    tasks.find("priority", 2).set("urgent", True)
    tasks.sort("name")
    for task in tasks:
        print(task.name, task.get("urgent", False))
"""

__version__ = "0.1.0"

# Collection
from objcollection.collection import Collection

# Configuration
from objcollection.config import CollectionSettings, get_settings

# Core primitives
from objcollection.core import (
    CollectionError,
    ComparatorOrder,
    FieldEquals,
    FieldMatches,
    FieldOrder,
    HasField,
    IndexOutOfRangeError,
    InvalidCallbackError,
    InvalidRecordError,
    MissingFieldError,
    Record,
    natural_compare,
    normalize_record,
)

__all__ = [
    # Version
    "__version__",
    # Collection
    "Collection",
    # Records
    "Record",
    "normalize_record",
    # Queries
    "HasField",
    "FieldEquals",
    "FieldMatches",
    # Ordering
    "FieldOrder",
    "ComparatorOrder",
    "natural_compare",
    # Errors
    "CollectionError",
    "IndexOutOfRangeError",
    "InvalidCallbackError",
    "InvalidRecordError",
    "MissingFieldError",
    # Config
    "CollectionSettings",
    "get_settings",
]
