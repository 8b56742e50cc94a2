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

"""``warmups property`` command."""

from __future__ import annotations

import argparse
import json
from typing import TYPE_CHECKING

from warmups._internal.exceptions import WarmupsValidationError
from warmups.cli.helpers import echo, register_argument
from warmups.json import require_json_object
from warmups.records import get_property

if TYPE_CHECKING:
    from warmups.cli.types import SubparserCollection
    from warmups.config import Settings


def register_property_command(subparsers: SubparserCollection) -> None:
    """Attach the ``property`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
    """
    prop = subparsers.add_parser(
        "property",
        help="Print one field of a JSON record",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(prop, "record", help='JSON object, e.g. \'{"name": "Alice", "age": 30}\'.')
    register_argument(prop, "field", help="Name of the field to print.")


def execute_property(args: argparse.Namespace, _: Settings) -> int:
    """Print the JSON encoding of ``args.field`` in ``args.record``.

    Raises:
        WarmupsValidationError: If the record is not valid JSON.
        UnknownFieldError: If the record has no such field.
    """
    try:
        record = require_json_object(args.record)
    except json.JSONDecodeError as exc:
        message = f"Record is not valid JSON: {exc}"
        raise WarmupsValidationError(message) from exc
    echo(json.dumps(get_property(record, args.field), ensure_ascii=False))
    return 0


__all__ = ["execute_property", "register_property_command"]
