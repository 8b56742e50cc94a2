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

"""Reductions and transformations over numeric sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

from warmups._internal.collection_utils import dedupe_preserve

if TYPE_CHECKING:
    from collections.abc import Iterable

    from warmups.core.type_aliases import Number, NumberT


def sum_array(numbers: Iterable[Number]) -> Number:
    """Return the arithmetic sum of ``numbers``.

    Args:
        numbers: Numbers to add up. May be empty.

    Returns:
        The total, ``0`` for an empty input. All-integer input stays an
        ``int``; a single float makes the result a ``float``.
    """
    return sum(numbers, 0)


def remove_duplicates(numbers: Iterable[NumberT]) -> list[NumberT]:
    """Return ``numbers`` without repeats, keeping first-occurrence order.

    Equality is value equality, so ``1`` and ``1.0`` count as the same number
    and only the first of them is kept. The input is not modified.

    Args:
        numbers: Numbers to deduplicate.

    Returns:
        A new list holding each distinct value once.
    """
    return dedupe_preserve(numbers)


__all__ = ["remove_duplicates", "sum_array"]
