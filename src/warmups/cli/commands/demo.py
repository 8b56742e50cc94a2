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

"""``warmups demo`` command: run each exercise on its sample input."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from warmups.arrays import remove_duplicates, sum_array
from warmups.cars import Car
from warmups.cli.helpers import echo
from warmups.records import FieldSelector, get_property
from warmups.text import count_word_occurrences

if TYPE_CHECKING:
    from warmups.cli.types import SubparserCollection
    from warmups.config import Settings


def register_demo_command(subparsers: SubparserCollection) -> None:
    """Attach the ``demo`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
    """
    _ = subparsers.add_parser(
        "demo",
        help="Run every exercise on its sample input",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )


def demo_lines(settings: Settings) -> list[str]:
    """Return one ``call = result`` line per exercise."""
    numbers = [1, 2, 3, 4, 5]
    repeated = [1, 2, 2, 3, 4, 4, 5]
    sentence, word = "I love typescript TypeScript", "typescript"
    person: dict[str, object] = {"name": "Alice", "age": 30}
    name = FieldSelector.for_record(person, "name", str)
    car = Car("BMW", "M7", 2018)
    return [
        f"sum_array({numbers}) = {sum_array(numbers)}",
        f"remove_duplicates({repeated}) = {remove_duplicates(repeated)}",
        f"count_word_occurrences({sentence!r}, {word!r}) = {count_word_occurrences(sentence, word)}",
        f"get_property({person}, {name.name!r}) = {get_property(person, name)!r}",
        f"Car{(car.make, car.model, car.year)}.get_car_age() = {car.get_car_age(settings.clock())}",
    ]


def execute_demo(_: argparse.Namespace, settings: Settings) -> int:
    """Print the sample results."""
    for line in demo_lines(settings):
        echo(line)
    return 0


__all__ = ["demo_lines", "execute_demo", "register_demo_command"]
