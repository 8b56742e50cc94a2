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

"""Exception hierarchy shared by every warmups module.

``WarmupsError`` is the root the CLI catches to turn failures into exit
status 2 and a stable error code. Validation failures (unknown record
fields, bad settings values, unreadable settings files, malformed JSON
records) derive from ``WarmupsValidationError`` and so also from
``ValueError``. Shape failures (records without discoverable fields, JSON
that is not an object) derive from ``WarmupsTypeError`` and ``TypeError``.
"""

from __future__ import annotations

__all__ = ["WarmupsError", "WarmupsTypeError", "WarmupsValidationError"]


class WarmupsError(Exception):
    """Root of every error warmups raises on purpose."""


class WarmupsValidationError(WarmupsError, ValueError):
    """Raised when a value is well-typed but not acceptable.

    Examples are a field name a record does not have, or a log level outside
    the supported choices.
    """


class WarmupsTypeError(WarmupsError, TypeError):
    """Raised when an input has the wrong shape, such as a JSON array where a record was expected."""
