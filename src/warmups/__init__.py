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

"""warmups - small, typed Python exercises.

Provides numeric sequence helpers, case-insensitive word counting, typed
record field access, and a ``Car`` entity whose age is computed against an
injectable clock.
"""

from __future__ import annotations

from warmups.exceptions import (
    WarmupsError,
    WarmupsTypeError,
    WarmupsValidationError,
)

from .arrays import remove_duplicates, sum_array
from .cars import Car, Clock, FixedClock, SystemClock
from .config import Settings, load_settings
from .error_codes import error_code_for
from .logging import configure_logging
from .records import (
    FieldSelector,
    UnknownFieldError,
    UnsupportedRecordError,
    get_property,
    record_fields,
)
from .text import count_word_occurrences

__all__ = [
    "Car",
    "Clock",
    "FieldSelector",
    "FixedClock",
    "Settings",
    "SystemClock",
    "UnknownFieldError",
    "UnsupportedRecordError",
    "WarmupsError",
    "WarmupsTypeError",
    "WarmupsValidationError",
    "__version__",
    "configure_logging",
    "count_word_occurrences",
    "error_code_for",
    "get_property",
    "load_settings",
    "record_fields",
    "remove_duplicates",
    "sum_array",
]

__version__ = "0.1.0"
