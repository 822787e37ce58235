"""Configuration settings using Pydantic Settings.

Fixes the policy choices a collection makes when input is ambiguous.

Usage:
    from objcollection.config import CollectionSettings

    # Load from environment variables (OBJCOLLECTION_*)
    settings = CollectionSettings()

    # Or override with explicit values
    settings = CollectionSettings(missing_field="none")
    people = Collection(rows, settings=settings)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CollectionSettings(BaseSettings):  # type: ignore[misc]
    """Policies for Collection operations.

    Attributes:
        missing_field: What get() and field sort() do when a record lacks the
            field: "raise" MissingFieldError or read it as "none".
        insert_overflow: What add_at() does with an index past the tail or
            below zero: "raise" IndexOutOfRangeError or "append".
        loose_equality: Whether find(name, literal) coerces numbers and
            numeric strings (1 matches "1").
        natural_case_sensitive: Whether field sort() distinguishes case.

    Environment Variables:
        OBJCOLLECTION_MISSING_FIELD
        OBJCOLLECTION_INSERT_OVERFLOW
        OBJCOLLECTION_LOOSE_EQUALITY
        OBJCOLLECTION_NATURAL_CASE_SENSITIVE
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJCOLLECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    missing_field: Literal["raise", "none"] = "raise"
    insert_overflow: Literal["raise", "append"] = "raise"
    loose_equality: bool = True
    natural_case_sensitive: bool = True


@lru_cache(maxsize=1)
def get_settings() -> CollectionSettings:
    """Default settings, read from the environment once."""
    return CollectionSettings()
