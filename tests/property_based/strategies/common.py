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

"""Reusable Hypothesis strategies for the warmups exercises."""

from __future__ import annotations

from hypothesis import strategies as st

from warmups.core.type_aliases import Number

__all__ = [
    "finite_numbers",
    "integer_lists",
    "number_lists",
    "sentences",
    "words",
]


def finite_numbers() -> st.SearchStrategy[Number]:
    """Return a strategy that yields ints and finite floats."""
    return st.one_of(
        st.integers(min_value=-10_000, max_value=10_000),
        st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6),
    )


def integer_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy of short integer lists with plenty of repeats."""
    return st.lists(st.integers(min_value=-5, max_value=5), max_size=max_size)


def number_lists(max_size: int = 30) -> st.SearchStrategy[list[Number]]:
    """Return a strategy of mixed int/float lists."""
    return st.lists(finite_numbers(), max_size=max_size)


def words(min_size: int = 1, max_size: int = 8) -> st.SearchStrategy[str]:
    """Return a strategy of space-free words in mixed case."""
    return st.from_regex(rf"[A-Za-z]{{{min_size},{max_size}}}", fullmatch=True)


def sentences(max_words: int = 12) -> st.SearchStrategy[list[str]]:
    """Return a strategy of word lists to be joined into sentences."""
    return st.lists(words(), max_size=max_words)
