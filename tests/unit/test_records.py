# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for typed record field access."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, cast

import pytest
from pydantic import BaseModel

from warmups.compat import TypedDict
from warmups.records import (
    FieldSelector,
    UnknownFieldError,
    UnsupportedRecordError,
    get_property,
    record_fields,
)

pytestmark = pytest.mark.unit


class PersonDict(TypedDict):
    name: str
    age: int


@dataclass(frozen=True, slots=True)
class PersonRecord:
    name: str
    age: int


class PersonModel(BaseModel):
    name: str
    age: int


class PersonTuple(NamedTuple):
    name: str
    age: int


class PersonObject:
    def __init__(self, name: str, age: int) -> None:
        self.name = name
        self.age = age


class PersonDefaults:
    name: str = "Alice"
    age: int = 30


class PersonSlots:
    __slots__ = ("age", "name")

    name: str
    age: int

    def __init__(self, name: str, age: int | None = None) -> None:
        self.name = name
        if age is not None:
            self.age = age


class Opaque:
    __slots__ = ()


def test_get_property_reads_mapping_fields() -> None:
    record = {"name": "Alice", "age": 30}
    assert get_property(record, "name") == "Alice"
    assert get_property(record, "age") == 30


def test_get_property_preserves_value_identity() -> None:
    tags = ["a", "b"]
    record = {"tags": tags}
    assert get_property(record, "tags") is tags


@pytest.mark.parametrize(
    "record",
    [
        PersonRecord(name="Alice", age=30),
        PersonModel(name="Alice", age=30),
        PersonTuple(name="Alice", age=30),
        PersonObject(name="Alice", age=30),
        PersonDefaults(),
        PersonSlots(name="Alice", age=30),
    ],
    ids=["dataclass", "pydantic", "namedtuple", "object", "class-defaults", "slots"],
)
def test_get_property_reads_attribute_records(record: object) -> None:
    assert get_property(record, "name") == "Alice"
    assert get_property(record, "age") == 30


def test_plain_names_agree_with_selectors_for_annotated_classes() -> None:
    record = PersonDefaults()
    selector = FieldSelector.of(PersonDefaults, "name", str)
    assert get_property(record, selector) == get_property(record, "name") == "Alice"
    assert record_fields(record) == record_fields(PersonDefaults) == ("name", "age")


def test_unset_slots_are_not_fields() -> None:
    record = PersonSlots(name="Alice")
    assert record_fields(PersonSlots) == ("name", "age")
    assert record_fields(record) == ("name",)
    with pytest.raises(UnknownFieldError) as excinfo:
        _ = get_property(record, "age")
    assert excinfo.value.known == ("name",)


def test_get_property_rejects_unknown_plain_name() -> None:
    with pytest.raises(UnknownFieldError) as excinfo:
        _ = get_property({"name": "Alice"}, "email")
    assert excinfo.value.field == "email"
    assert excinfo.value.known == ("name",)
    assert "email" in str(excinfo.value)


def test_get_property_does_not_reach_methods_or_properties() -> None:
    with pytest.raises(UnknownFieldError):
        _ = get_property(PersonModel(name="Alice", age=30), "model_dump")


def test_selector_of_validates_against_declared_fields() -> None:
    name = FieldSelector.of(PersonRecord, "name", str)
    age = FieldSelector.of(PersonRecord, "age", int)
    record = PersonRecord(name="Alice", age=30)
    assert get_property(record, name) == "Alice"
    assert get_property(record, age) == 30
    assert name.record_type is PersonRecord


@pytest.mark.parametrize("record_type", [PersonDict, PersonRecord, PersonModel, PersonTuple])
def test_selector_of_rejects_unknown_field_at_construction(record_type: type) -> None:
    with pytest.raises(UnknownFieldError) as excinfo:
        _ = FieldSelector.of(record_type, "email", str)
    assert excinfo.value.record_type == record_type.__qualname__
    assert excinfo.value.known == ("name", "age")


def test_selector_for_typeddict_reads_by_key() -> None:
    record: PersonDict = {"name": "Alice", "age": 30}
    name = FieldSelector.of(PersonDict, "name", str)
    assert get_property(record, name) == "Alice"


def test_selector_for_record_checks_concrete_keys() -> None:
    record: dict[str, object] = {"name": "Alice", "age": 30}
    selector = FieldSelector.for_record(record, "age", int)
    assert selector.record_type is dict
    assert selector.read(record) == 30
    with pytest.raises(UnknownFieldError):
        _ = FieldSelector.for_record(record, "email", str)


def test_selector_read_skips_validation() -> None:
    selector = FieldSelector.of(PersonRecord, "name", str)
    assert selector.read(cast("PersonRecord", PersonObject("Bob", 41))) == "Bob"


def test_record_fields_follow_declaration_order() -> None:
    assert record_fields(PersonDict) == ("name", "age")
    assert record_fields(PersonRecord) == ("name", "age")
    assert record_fields(PersonModel) == ("name", "age")
    assert record_fields(PersonTuple) == ("name", "age")
    assert record_fields(PersonObject("Alice", 30)) == ("name", "age")
    assert record_fields({"age": 1, "name": "x", 3: "ignored"}) == ("age", "name")


def test_record_fields_falls_back_to_class_annotations() -> None:
    class Plain:
        name: str
        age: int

    assert record_fields(Plain) == ("name", "age")


def test_record_fields_rejects_records_without_fields() -> None:
    with pytest.raises(UnsupportedRecordError):
        _ = record_fields(Opaque)
    with pytest.raises(UnsupportedRecordError):
        _ = record_fields(Opaque())
    with pytest.raises(UnsupportedRecordError):
        _ = get_property(42, "real")
