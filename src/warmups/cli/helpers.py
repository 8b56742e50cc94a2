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

"""Argument and output helpers shared by CLI commands."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from warmups.core.type_aliases import Number


class _TextStream(Protocol):
    def write(self, s: str, /) -> int: ...


class _ArgumentRegistrar(Protocol):
    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action: ...  # noqa: ANN401


def echo(message: str, *, newline: bool = True, err: bool = False) -> None:
    """Write a message to stdout or stderr."""
    stream: _TextStream = sys.stderr if err else sys.stdout
    _ = stream.write(message)
    if newline:
        _ = stream.write("\n")


def register_argument(
    registrar: _ArgumentRegistrar,
    *args: Any,  # noqa: ANN401
    **kwargs: Any,  # noqa: ANN401
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle.

    Args:
        registrar: Parser or argument group on which to register the option.
        *args: Positional flags and option strings forwarded to ``add_argument``.
        **kwargs: Keyword options forwarded to ``add_argument``.
    """
    _ = registrar.add_argument(*args, **kwargs)


def parse_number(raw: str) -> Number:
    """Parse a CLI token as an ``int`` when possible, else as a ``float``.

    Raises:
        argparse.ArgumentTypeError: If the token is not a number.
    """
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as exc:
        message = f"'{raw}' is not a number"
        raise argparse.ArgumentTypeError(message) from exc


__all__ = ["echo", "parse_number", "register_argument"]
