"""Configuration module using Pydantic Settings.

Usage:
    from objcollection.config import CollectionSettings, get_settings

    settings = CollectionSettings(insert_overflow="append")
"""

from objcollection.config.settings import CollectionSettings, get_settings

__all__ = [
    "CollectionSettings",
    "get_settings",
]
