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

"""``warmups car-age`` command."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from warmups.cars import Car, FixedClock
from warmups.cli.helpers import echo, register_argument

if TYPE_CHECKING:
    from warmups.cars import Clock
    from warmups.cli.types import SubparserCollection
    from warmups.config import Settings


def register_car_age_command(subparsers: SubparserCollection) -> None:
    """Attach the ``car-age`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
    """
    car_age = subparsers.add_parser(
        "car-age",
        help="Print the age of a car in calendar years",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(car_age, "make", help="Manufacturer, e.g. BMW.")
    register_argument(car_age, "model", help="Model name, e.g. M7.")
    register_argument(car_age, "year", type=int, help="Year of manufacture.")
    register_argument(
        car_age,
        "--current-year",
        type=int,
        default=None,
        help="Compute the age as of this year (default: settings or today's date).",
    )


def resolve_clock(args: argparse.Namespace, settings: Settings) -> Clock:
    """Return the clock selected by ``--current-year`` or the resolved settings."""
    current_year: int | None = getattr(args, "current_year", None)
    if current_year is not None:
        return FixedClock(current_year)
    return settings.clock()


def execute_car_age(args: argparse.Namespace, settings: Settings) -> int:
    """Print the age of the car described by ``args``."""
    car = Car(make=args.make, model=args.model, year=args.year)
    echo(str(car.get_car_age(resolve_clock(args, settings))))
    return 0


__all__ = ["execute_car_age", "register_car_age_command", "resolve_clock"]
