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

"""Property-based tests for the numeric sequence helpers."""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.property_based.strategies import integer_lists, number_lists
from warmups.arrays import remove_duplicates, sum_array
from warmups.core.type_aliases import Number

pytestmark = pytest.mark.property


@given(integer_lists())
def test_h_sum_array_ignores_order(numbers: list[int]) -> None:
    assert sum_array(numbers) == sum_array(list(reversed(numbers)))


@given(integer_lists())
def test_h_sum_array_matches_builtin_sum(numbers: list[int]) -> None:
    assert sum_array(numbers) == sum(numbers)


@given(number_lists())
def test_h_remove_duplicates_keeps_each_value_once(numbers: list[Number]) -> None:
    result = remove_duplicates(numbers)
    assert all(value in numbers for value in result)
    assert len(result) == len(set(result))
    assert set(result) == set(numbers)


@given(integer_lists())
def test_h_remove_duplicates_preserves_first_occurrence_order(numbers: list[int]) -> None:
    result = remove_duplicates(numbers)
    assert result == sorted(set(numbers), key=numbers.index)


@given(integer_lists())
def test_h_remove_duplicates_is_idempotent_and_leaves_input_alone(numbers: list[int]) -> None:
    original = list(numbers)
    once = remove_duplicates(numbers)
    assert remove_duplicates(once) == once
    assert numbers == original
