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

"""Helper functions for deterministic collection operations."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def dedupe_preserve(values: Iterable[T]) -> list[T]:
    """Return items in order, dropping subsequent duplicates.

    Membership follows Python equality and hashing, so values that compare
    equal (``1``, ``1.0`` and ``True`` for instance) collapse onto the first
    one seen. Every float NaN counts as the same value, so only the first NaN
    is kept regardless of object identity.

    Args:
        values: Iterable of hashable items whose first occurrence should be
            preserved.

    Returns:
        A new list containing the first appearance of each unique value,
        ordered by the original traversal.
    """
    seen: set[T] = set()
    seen_nan = False
    result: list[T] = []
    for value in values:
        if isinstance(value, float) and math.isnan(value):
            if seen_nan:
                continue
            seen_nan = True
        elif value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def count_matching(values: Iterable[T], target: T) -> int:
    """Return how many items of ``values`` compare equal to ``target``."""
    return sum(1 for value in values if value == target)


__all__ = ["count_matching", "dedupe_preserve"]
