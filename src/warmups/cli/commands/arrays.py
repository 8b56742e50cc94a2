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

"""``warmups sum`` and ``warmups dedupe`` commands."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from warmups.arrays import remove_duplicates, sum_array
from warmups.cli.helpers import echo, parse_number, register_argument

if TYPE_CHECKING:
    from warmups.cli.types import SubparserCollection
    from warmups.config import Settings


def register_arrays_commands(subparsers: SubparserCollection) -> None:
    """Attach the ``sum`` and ``dedupe`` commands to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
    """
    for name, help_text in (
        ("sum", "Print the sum of the given numbers"),
        ("dedupe", "Print the given numbers with duplicates removed"),
    ):
        command = subparsers.add_parser(
            name,
            help=help_text,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )
        register_argument(
            command,
            "numbers",
            nargs="*",
            type=parse_number,
            help="Numbers to process (integers or decimals).",
        )


def execute_sum(args: argparse.Namespace, _: Settings) -> int:
    """Print the sum of ``args.numbers``."""
    echo(str(sum_array(args.numbers)))
    return 0


def execute_dedupe(args: argparse.Namespace, _: Settings) -> int:
    """Print ``args.numbers`` without duplicates, space-separated."""
    echo(" ".join(str(value) for value in remove_duplicates(args.numbers)))
    return 0


__all__ = ["execute_dedupe", "execute_sum", "register_arrays_commands"]
