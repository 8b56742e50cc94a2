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

"""Property-based tests for word counting."""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.property_based.strategies import sentences, words
from warmups.text import count_word_occurrences, tokenize

pytestmark = pytest.mark.property


@given(sentences(), words())
def test_h_count_matches_case_insensitive_token_count(tokens: list[str], word: str) -> None:
    sentence = " ".join(tokens)
    expected = sum(1 for token in tokens if token.lower() == word.lower())
    assert count_word_occurrences(sentence, word) == expected


@given(sentences(), words())
def test_h_count_ignores_case_of_both_inputs(tokens: list[str], word: str) -> None:
    sentence = " ".join(tokens)
    assert count_word_occurrences(sentence.upper(), word) == count_word_occurrences(
        sentence,
        word.swapcase(),
    )


@given(sentences(), words())
def test_h_count_is_bounded_by_token_count(tokens: list[str], word: str) -> None:
    sentence = " ".join(tokens)
    assert 0 <= count_word_occurrences(sentence, word) <= len(tokenize(sentence))
