"""Tests for CollectionSettings."""

import pytest
from pydantic import ValidationError

from objcollection.config import CollectionSettings, get_settings


def test_defaults():
    settings = CollectionSettings()

    assert settings.missing_field == "raise"
    assert settings.insert_overflow == "raise"
    assert settings.loose_equality is True
    assert settings.natural_case_sensitive is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OBJCOLLECTION_MISSING_FIELD", "none")
    monkeypatch.setenv("OBJCOLLECTION_INSERT_OVERFLOW", "append")
    monkeypatch.setenv("OBJCOLLECTION_LOOSE_EQUALITY", "false")

    settings = CollectionSettings()

    assert settings.missing_field == "none"
    assert settings.insert_overflow == "append"
    assert settings.loose_equality is False


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("OBJCOLLECTION_MISSING_FIELD", "none")

    assert CollectionSettings(missing_field="raise").missing_field == "raise"


def test_invalid_policy_rejected():
    with pytest.raises(ValidationError):
        CollectionSettings(insert_overflow="clamp")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
