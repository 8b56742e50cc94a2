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

"""The ``Car`` entity and the clocks used to compute its age.

Ages are computed against a ``Clock`` passed to ``Car.get_car_age``. Without
one, the local calendar year is read from ``SystemClock`` on every call, so the
same car reports a different age once the year rolls over.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Final, Protocol, runtime_checkable

from warmups._internal.logging_utils import structured_extra
from warmups.core.model_types import LogComponent

logger: logging.Logger = logging.getLogger("warmups.cars")


@runtime_checkable
class Clock(Protocol):
    """Source of the current calendar year."""

    def current_year(self) -> int:
        """Return the current calendar year."""
        ...


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Clock backed by the local system date."""

    def current_year(self) -> int:
        """Return the year of today's local date."""
        return date.today().year


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock pinned to a single year.

    Attributes:
        year: Year reported by `current_year`.
    """

    year: int

    def current_year(self) -> int:
        """Return the pinned year."""
        return self.year


DEFAULT_CLOCK: Final[Clock] = SystemClock()


@dataclass(frozen=True, slots=True)
class Car:
    """A car identified by make, model, and manufacture year.

    Values are stored verbatim; negative or future years are accepted.

    Attributes:
        make: Manufacturer name.
        model: Model name.
        year: Calendar year of manufacture.
    """

    make: str
    model: str
    year: int

    def get_car_age(self, clock: Clock | None = None) -> int:
        """Return the car's age in whole calendar years.

        The age is recomputed on every call and is never cached. A car built
        in the current year is ``0`` years old; a car dated in the future has
        a negative age.

        Args:
            clock: Source of the current year. Defaults to ``SystemClock``.

        Returns:
            ``clock.current_year() - year``.
        """
        active_clock = DEFAULT_CLOCK if clock is None else clock
        current_year = active_clock.current_year()
        age = current_year - self.year
        logger.debug(
            "Computed age %d for %s",
            age,
            self.describe(),
            extra=structured_extra(
                component=LogComponent.CARS,
                operation="get_car_age",
                details={"current_year": current_year, "year": self.year},
            ),
        )
        return age

    def describe(self) -> str:
        """Return a display label such as ``"2018 BMW M7"``."""
        return f"{self.year} {self.make} {self.model}"


__all__ = ["DEFAULT_CLOCK", "Car", "Clock", "FixedClock", "SystemClock"]
