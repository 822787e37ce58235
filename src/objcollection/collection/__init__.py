"""Stateful record container."""

from objcollection.collection.collection import Collection

__all__ = [
    "Collection",
]
