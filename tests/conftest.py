"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from objcollection import Collection, CollectionSettings, Record


@pytest.fixture
def settings():
    """Default policies, independent of the environment."""
    return CollectionSettings()


@pytest.fixture
def people(settings):
    """Four people, one without an age."""
    return Collection(
        [
            {"name": "ann", "age": 31},
            {"name": "bob", "age": "17"},
            {"name": "cat"},
            {"name": "dan", "age": 45},
        ],
        settings=settings,
    )


@pytest.fixture
def letters(settings):
    """Five single-field records a..e."""
    return Collection([Record(letter=ch) for ch in "abcde"], settings=settings)
