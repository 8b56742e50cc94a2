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

"""Compatibility layer for the typing features warmups relies on.

Typed records, structured logging payloads, and the typed field selectors all
use constructs that landed across Python 3.10-3.12. They are imported from the
standard library when available and from `typing_extensions` otherwise.

Attributes:
    NotRequired
    Self
    TypedDict
    Unpack
    is_typeddict
    override

Notes:
    - Under `TYPE_CHECKING` every name comes from `typing_extensions` so type
      checkers see a single API regardless of the targeted interpreter.
    - `TypedDict` and `is_typeddict` are always taken from the same module;
      `typing_extensions.is_typeddict` does not recognise stdlib TypedDicts
      on older interpreters and vice versa.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import (
        NotRequired,
        Self,
        TypedDict,
        Unpack,
        is_typeddict,
        override,
    )
else:
    try:
        from typing import TypedDict, is_typeddict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, is_typeddict, override

    try:
        from typing import NotRequired, Self, Unpack  # py>=3.11
    except ImportError:  # py<3.11
        from typing_extensions import NotRequired, Self, Unpack

__all__ = [
    "NotRequired",
    "Self",
    "TypedDict",
    "Unpack",
    "is_typeddict",
    "override",
]
