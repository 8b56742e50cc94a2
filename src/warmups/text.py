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

"""Word counting over simple, punctuation-free sentences.

Sentences are split on the single space character only. Consecutive spaces
therefore produce empty tokens, and punctuation stays attached to the word it
touches (``"word,"`` never matches ``"word"``).
"""

from __future__ import annotations

from typing import Final

from warmups._internal.collection_utils import count_matching

WORD_DELIMITER: Final[str] = " "


def tokenize(sentence: str) -> list[str]:
    """Lower-case ``sentence`` and split it on single spaces."""
    return sentence.lower().split(WORD_DELIMITER)


def count_word_occurrences(sentence: str, word: str) -> int:
    """Count case-insensitive exact matches of ``word`` among sentence tokens.

    Args:
        sentence: Space-delimited text without punctuation.
        word: Token to look for.

    Returns:
        Number of tokens equal to ``word`` once both are lower-cased.
    """
    return count_matching(tokenize(sentence), word.lower())


__all__ = ["WORD_DELIMITER", "count_word_occurrences", "tokenize"]
