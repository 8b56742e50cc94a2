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

"""Canonical JSON types and helpers used across warmups.

This module has no dependencies on logging, configuration, or CLI layers so
that any of them can import it.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TypeAlias, cast

from pydantic import JsonValue

from warmups._internal.exceptions import WarmupsTypeError

__all__ = [
    "JSONMapping",
    "JSONValue",
    "normalise_enums_for_json",
    "require_json_object",
]

JSONValue: TypeAlias = JsonValue
JSONMapping = dict[str, JsonValue]


def require_json_object(payload: str) -> JSONMapping:
    """Parse a JSON string that must decode to an object.

    Args:
        payload: Raw JSON text.

    Returns:
        Parsed JSON object as a string-keyed mapping.

    Raises:
        WarmupsTypeError: If the payload decodes to anything but an object.
        json.JSONDecodeError: If the payload is not valid JSON.
    """
    data: object = json.loads(payload)
    if not isinstance(data, dict):
        message = f"Expected a JSON object but received {type(data).__name__}"
        raise WarmupsTypeError(message)
    return cast("JSONMapping", data)


def normalise_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their string payloads for JSON serialisation.

    Args:
        value: Arbitrary Python object hierarchy that may include `Enum`
            instances, mappings, or sequences.

    Returns:
        A JSON-compatible structure with all enum keys and values replaced by
        their `.value` payloads. Unknown objects are rendered with `str()`.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, dict):
            mapping_obj = cast("dict[object, object]", obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                norm_key = str(key.value) if isinstance(key, Enum) else str(key)
                result[norm_key] = _convert(raw_val)
            return result
        if isinstance(obj, (list, tuple)):
            items = cast("list[object] | tuple[object, ...]", obj)
            return [_convert(item) for item in items]
        if isinstance(obj, (str, int, float, bool)) or obj is None:
            return obj
        return str(obj)

    return _convert(value)
