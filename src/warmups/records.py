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

"""Typed access to the fields of structured records.

A record is anything with named fields: a mapping, a dataclass, a pydantic
model, a ``NamedTuple``, a ``TypedDict`` value, or a plain object. Fields are
read from mappings by key and from every other record by attribute.

Two access paths are provided:

- ``FieldSelector`` names a field and is checked against the record's known
  fields when it is built. Reading through a selector performs no further
  check, and the selector carries the value type for static checkers.
- ``get_property(record, "name")`` with a plain string checks the field at
  call time and raises ``UnknownFieldError`` when it is missing.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar, cast, overload

from pydantic import BaseModel

from warmups._internal.exceptions import WarmupsTypeError, WarmupsValidationError
from warmups.compat import is_typeddict
from warmups.core.type_aliases import FieldName

RecordT = TypeVar("RecordT")
ValueT = TypeVar("ValueT")

__all__ = [
    "FieldSelector",
    "UnknownFieldError",
    "UnsupportedRecordError",
    "get_property",
    "record_fields",
]


class UnknownFieldError(WarmupsValidationError):
    """Raised when a field name is not one of a record's known fields."""

    def __init__(self, record_type: str, field: str, known: tuple[str, ...]) -> None:
        """Initialise the error with the offending name and the known fields.

        Args:
            record_type: Name of the record type that was inspected.
            field: Field name that was requested.
            known: Field names the record does declare.
        """
        self.record_type = record_type
        self.field = field
        self.known = known
        known_text = ", ".join(known) if known else "<none>"
        super().__init__(f"'{field}' is not a field of {record_type} (known fields: {known_text})")


class UnsupportedRecordError(WarmupsTypeError):
    """Raised when no field names can be discovered for a record."""

    def __init__(self, record_type: str) -> None:
        self.record_type = record_type
        super().__init__(f"Cannot discover the fields of {record_type}")


def _type_name(value: object) -> str:
    record_type = value if isinstance(value, type) else type(value)
    return record_type.__qualname__


def _declared_fields(record_type: type) -> tuple[str, ...] | None:
    if is_typeddict(record_type):
        return tuple(inspect.get_annotations(record_type))
    if dataclasses.is_dataclass(record_type):
        return tuple(field.name for field in dataclasses.fields(record_type))
    if issubclass(record_type, BaseModel):
        return tuple(record_type.model_fields)
    named_fields: object = getattr(record_type, "_fields", None)
    if issubclass(record_type, tuple) and isinstance(named_fields, tuple):
        return tuple(str(name) for name in cast("tuple[object, ...]", named_fields))
    return None


def _class_attributes(record_type: type) -> tuple[str, ...]:
    names: dict[str, None] = {}
    for klass in reversed(record_type.__mro__):
        names.update(dict.fromkeys(inspect.get_annotations(klass)))
        slots: object = vars(klass).get("__slots__", ())
        slot_names = (slots,) if isinstance(slots, str) else cast("Iterable[object]", slots)
        for name in slot_names:
            if isinstance(name, str) and name not in {"__dict__", "__weakref__"}:
                names.setdefault(name, None)
    return tuple(names)


def record_fields(record: object) -> tuple[str, ...]:
    """Return the field names of a record or record type, in declaration order.

    Types are inspected through their declarations (``TypedDict`` keys,
    dataclass fields, pydantic ``model_fields``, ``NamedTuple._fields`` and,
    failing those, class annotations and ``__slots__``). Mappings report their
    string keys. Instances of other undeclared types report the annotated or
    slotted names they actually hold, followed by their instance attributes.

    Args:
        record: Record instance or record type.

    Returns:
        Tuple of field names.

    Raises:
        UnsupportedRecordError: If no fields can be discovered.
    """
    if isinstance(record, type):
        declared = _declared_fields(record)
        if declared is not None:
            return declared
        attributes = _class_attributes(record)
        if attributes:
            return attributes
        raise UnsupportedRecordError(_type_name(record))
    if isinstance(record, Mapping):
        keys = cast("Mapping[object, object]", record)
        return tuple(key for key in keys if isinstance(key, str))
    declared = _declared_fields(type(record))
    if declared is not None:
        return declared
    names = dict.fromkeys(name for name in _class_attributes(type(record)) if hasattr(record, name))
    instance_attributes = getattr(record, "__dict__", None)
    if isinstance(instance_attributes, dict):
        names.update(dict.fromkeys(cast("dict[str, object]", instance_attributes)))
    elif not names:
        raise UnsupportedRecordError(_type_name(record))
    return tuple(names)


def _require_field(record: object, name: str) -> FieldName:
    known = record_fields(record)
    if name not in known:
        raise UnknownFieldError(_type_name(record), name, known)
    return FieldName(name)


def _read_field(record: object, name: str) -> object:
    if isinstance(record, Mapping):
        return cast("Mapping[str, object]", record)[name]
    return getattr(record, name)


@dataclass(frozen=True, slots=True)
class FieldSelector(Generic[RecordT, ValueT]):
    """A field name validated against a record type when it is built.

    Build selectors with :meth:`of` (against a declared record type) or
    :meth:`for_record` (against a concrete record, e.g. a plain ``dict``).
    ``value_type`` only informs static type checkers; it is not enforced.

    Attributes:
        record_type: Record type the name was validated against.
        name: Field name.
    """

    record_type: type[RecordT]
    name: FieldName

    @classmethod
    def of(
        cls,
        record_type: type[RecordT],
        name: str,
        value_type: type[ValueT],
    ) -> FieldSelector[RecordT, ValueT]:
        """Build a selector for ``name`` on ``record_type``.

        Raises:
            UnknownFieldError: If ``record_type`` does not declare ``name``.
            UnsupportedRecordError: If ``record_type`` declares no fields.
        """
        del value_type
        return cls(record_type=record_type, name=_require_field(record_type, name))

    @classmethod
    def for_record(
        cls,
        record: RecordT,
        name: str,
        value_type: type[ValueT],
    ) -> FieldSelector[RecordT, ValueT]:
        """Build a selector for ``name`` from the fields ``record`` actually holds.

        Raises:
            UnknownFieldError: If ``record`` has no field called ``name``.
            UnsupportedRecordError: If ``record`` exposes no fields.
        """
        del value_type
        return cls(record_type=type(record), name=_require_field(record, name))

    def read(self, record: RecordT) -> ValueT:
        """Return the value stored under this selector's field."""
        return cast("ValueT", _read_field(record, self.name))


@overload
def get_property(record: RecordT, selector: FieldSelector[RecordT, ValueT]) -> ValueT: ...


@overload
def get_property(record: Mapping[str, ValueT], selector: str) -> ValueT: ...


@overload
def get_property(record: object, selector: str) -> object: ...


def get_property(record: object, selector: FieldSelector[object, object] | str) -> object:
    """Return the value of one field of ``record``, type preserved.

    Args:
        record: Record to read from.
        selector: A ``FieldSelector`` (already validated, read without a
            check) or a plain field name (checked against ``record`` first).

    Returns:
        The stored value, unchanged.

    Raises:
        UnknownFieldError: If a plain field name is not a field of ``record``.
    """
    if isinstance(selector, FieldSelector):
        return selector.read(record)
    return _read_field(record, _require_field(record, selector))
