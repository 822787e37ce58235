"""Tests for Collection construction, reads and queries."""

import pytest
from pydantic import BaseModel

from objcollection import (
    Collection,
    CollectionSettings,
    FieldEquals,
    IndexOutOfRangeError,
    InvalidRecordError,
    MissingFieldError,
    Record,
)


class Task(BaseModel):
    name: str


# Construction


def test_empty_construction(settings):
    assert Collection(settings=settings).count() == 0
    assert Collection([], settings=settings).to_list() == []


def test_construction_normalizes_mappings_and_keeps_records(settings):
    shared = Record(name="kept")

    collection = Collection([{"name": "raw"}, shared, Task(name="model")], settings=settings)

    assert all(isinstance(r, Record) for r in collection)
    assert collection.eq(1) is shared
    assert collection.get("name") == ["raw", "kept", "model"]


def test_construction_accepts_generators(settings):
    collection = Collection(({"i": i} for i in range(3)), settings=settings)

    assert collection.get("i") == [0, 1, 2]


def test_construction_rejects_invalid_entry(settings):
    with pytest.raises(InvalidRecordError):
        Collection([{"a": 1}, "nope"], settings=settings)


def test_default_settings_come_from_environment_loader():
    assert isinstance(Collection().settings, CollectionSettings)


# eq / indexing


def test_eq_returns_live_reference(people):
    people.eq(0)["age"] = 32

    assert people.to_list()[0]["age"] == 32


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_eq_out_of_range(people, index):
    with pytest.raises(IndexOutOfRangeError, match="eq\\(\\): index"):
        people.eq(index)


def test_eq_error_is_index_error(people):
    with pytest.raises(IndexError):
        people.eq(9)


def test_eq_accepts_integer_like_index(people):
    class Position:
        def __index__(self):
            return 2

    assert people.eq(Position()) is people.to_list()[2]


def test_eq_rejects_non_integer_index(people):
    with pytest.raises(TypeError):
        people.eq("0")
    with pytest.raises(TypeError):
        people.eq(True)


def test_getitem_int_and_slice(people):
    assert people[1] is people.eq(1)

    tail = people[2:]

    assert isinstance(tail, Collection)
    assert tail.get("name") == ["cat", "dan"]
    assert tail.eq(0) is people.eq(2)


def test_contains_uses_identity(people):
    assert people.eq(0) in people
    assert Record(name="ann", age=31) not in people


def test_repr_lists_records(settings):
    assert repr(Collection([{"a": 1}], settings=settings)) == "Collection([Record({'a': 1})])"


# find


def test_find_by_presence(people):
    found = people.find("age")

    assert found.get("name") == ["ann", "bob", "dan"]


def test_find_presence_includes_falsy_values(settings):
    collection = Collection([{"flag": False}, {"flag": 0}, {"other": 1}], settings=settings)

    assert collection.find("flag").count() == 2


def test_find_returns_new_collection_sharing_records(people):
    found = people.find("name", "ann")

    assert found is not people
    assert found.eq(0) is people.eq(0)
    found.remove_at(0)
    assert people.count() == 4


def test_find_loose_literal_match(settings):
    collection = Collection([{"a": 1}, {"a": "1"}, {"a": 2}], settings=settings)

    found = collection.find("a", 1)

    assert found.to_list() == [collection.eq(0), collection.eq(1)]


def test_find_strict_literal_match_when_loose_equality_disabled():
    collection = Collection(
        [{"a": 1}, {"a": "1"}, {"a": 2}],
        settings=CollectionSettings(loose_equality=False),
    )

    assert collection.find("a", 1).to_list() == [collection.eq(0)]


def test_find_literal_skips_records_missing_field(people):
    assert people.find("age", None).count() == 0


def test_find_literal_none_matches_explicit_none(settings):
    collection = Collection([{"owner": None}, {}], settings=settings)

    assert collection.find("owner", None).count() == 1


def test_find_with_predicate_and_args(people):
    def older_than(age, record, limit):
        return int(age) > limit

    found = people.find("age", older_than, 20)

    assert found.get("name") == ["ann", "dan"]


def test_find_predicate_receives_whole_record(people):
    seen = []

    people.find("age", lambda value, record, args: seen.append(record))

    assert seen == [people.eq(0), people.eq(1), people.eq(3)]


def test_find_with_prebuilt_query(people):
    assert people.find(FieldEquals("name", "cat")).eq(0) is people.eq(2)


def test_find_preserves_settings(people):
    assert people.find("age").settings is people.settings


# get


def test_get_returns_values_in_order(people):
    assert people.get("name") == ["ann", "bob", "cat", "dan"]


def test_get_missing_field_raises(people):
    with pytest.raises(MissingFieldError, match="index 2 has no field 'age'") as excinfo:
        people.get("age")

    assert excinfo.value.field == "age"
    assert excinfo.value.index == 2


def test_get_missing_field_is_lookup_error(people):
    with pytest.raises(LookupError):
        people.get("missing")


def test_get_missing_field_reads_none_under_none_policy():
    collection = Collection([{"a": 1}, {}], settings=CollectionSettings(missing_field="none"))

    assert collection.get("a") == [1, None]


def test_get_on_empty_collection(settings):
    assert Collection(settings=settings).get("anything") == []


# count / iteration / to_list


def test_count_and_len_agree(people):
    assert people.count() == len(people) == 4


def test_iteration_is_restartable_and_live(people):
    assert [r["name"] for r in people] == ["ann", "bob", "cat", "dan"]

    people.remove_at(0)

    assert [r["name"] for r in people] == ["bob", "cat", "dan"]


def test_to_list_is_a_copy_sharing_records(people):
    snapshot = people.to_list()
    snapshot.clear()

    assert people.count() == 4
    assert people.to_list()[0] is people.eq(0)
