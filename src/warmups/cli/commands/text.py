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

"""``warmups count`` command."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from warmups.cli.helpers import echo, register_argument
from warmups.text import count_word_occurrences

if TYPE_CHECKING:
    from warmups.cli.types import SubparserCollection
    from warmups.config import Settings


def register_count_command(subparsers: SubparserCollection) -> None:
    """Attach the ``count`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
    """
    count = subparsers.add_parser(
        "count",
        help="Count case-insensitive occurrences of a word in a sentence",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(count, "sentence", help="Space-separated sentence without punctuation.")
    register_argument(count, "word", help="Word to count.")


def execute_count(args: argparse.Namespace, _: Settings) -> int:
    """Print how often ``args.word`` occurs in ``args.sentence``."""
    echo(str(count_word_occurrences(args.sentence, args.word)))
    return 0


__all__ = ["execute_count", "register_count_command"]
