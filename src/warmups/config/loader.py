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

"""Settings discovery, loading, and precedence resolution.

Settings are layered from four sources, highest precedence first: CLI flags,
``WARMUPS_*`` environment variables, a settings file, and built-in defaults.
The settings file is ``warmups.toml`` (or ``.warmups.toml``) holding the keys
at top level, or a ``pyproject.toml`` with a ``[tool.warmups]`` table.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final, cast

from pydantic import ValidationError

from warmups._infra.precedence import resolve_with_precedence
from warmups._internal.logging_utils import LOG_FORMAT_ENV, LOG_LEVEL_ENV, structured_extra
from warmups.compat import tomllib
from warmups.core.model_types import LogComponent

from .models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    InvalidEnvironmentError,
    Settings,
    SettingsModel,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from warmups.core.model_types import LogFormat, LogLevel

CURRENT_YEAR_ENV: Final[str] = "WARMUPS_CURRENT_YEAR"
CONFIG_FILENAMES: Final[tuple[str, ...]] = ("warmups.toml", ".warmups.toml")
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"

logger: logging.Logger = logging.getLogger("warmups.config")


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for resolved settings and the file they were read from.

    Attributes:
        settings: Resolved settings.
        path: Settings file that contributed values, or None when no file was used.
    """

    settings: Settings
    path: Path | None


def _has_tool_table(path: Path) -> bool:
    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    tool = raw.get("tool")
    return isinstance(tool, dict) and "warmups" in tool


def discover_config(directory: Path) -> Path | None:
    """Return the settings file in ``directory``, if any.

    ``warmups.toml`` and ``.warmups.toml`` win over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.warmups]`` table.

    Args:
        directory: Directory to search (not its parents).

    Returns:
        Path to the settings file, or None when none exists.
    """
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file() and _has_tool_table(pyproject):
        return pyproject
    return None


def load_settings_file(path: Path) -> SettingsModel:
    """Read and validate a settings file.

    Args:
        path: ``warmups.toml``-style file or ``pyproject.toml``.

    Returns:
        Validated settings from the file.

    Raises:
        ConfigReadError: If the file cannot be read or is not valid TOML.
        InvalidConfigFileError: If the settings fail validation.
    """
    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    # ignore JUSTIFIED: unreadable or malformed files surface as ConfigReadError
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc
    data: object = raw
    if path.name == PYPROJECT_FILENAME:
        tool = raw.get("tool", {})
        data = cast("dict[str, object]", tool).get("warmups", {}) if isinstance(tool, dict) else {}
    try:
        return SettingsModel.model_validate(data)
    except ValidationError as exc:
        raise InvalidConfigFileError(path, exc) from exc


def settings_from_env(environ: Mapping[str, str] | None = None) -> SettingsModel:
    """Read settings from ``WARMUPS_*`` environment variables.

    Empty variables are treated as unset.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Validated settings from the environment.

    Raises:
        InvalidEnvironmentError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, str] = {}
    for key, variable in (
        ("log_format", LOG_FORMAT_ENV),
        ("log_level", LOG_LEVEL_ENV),
        ("current_year", CURRENT_YEAR_ENV),
    ):
        value = env.get(variable, "").strip()
        if value:
            raw[key] = value
    try:
        return SettingsModel.model_validate(raw)
    except ValidationError as exc:
        raise InvalidEnvironmentError(exc) from exc


def load_settings(
    *,
    log_format: LogFormat | str | None = None,
    log_level: LogLevel | str | None = None,
    current_year: int | None = None,
    config_path: Path | None = None,
    search_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LoadedSettings:
    """Resolve settings from CLI values, environment, settings file, and defaults.

    Args:
        log_format: Log format given on the command line.
        log_level: Log level given on the command line.
        current_year: Pinned year given on the command line.
        config_path: Explicit settings file; skips discovery when set.
        search_dir: Directory searched for a settings file (default: cwd).
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The resolved settings and the settings file that was used.

    Raises:
        ConfigValidationError: If any source holds invalid values.
    """
    try:
        cli = SettingsModel.model_validate(
            {"log_format": log_format, "log_level": log_level, "current_year": current_year},
        )
    except ValidationError as exc:
        message = f"Invalid command-line settings: {exc}"
        raise ConfigValidationError(message) from exc
    env = settings_from_env(environ)
    path = config_path if config_path is not None else discover_config(search_dir or Path.cwd())
    file_settings = load_settings_file(path) if path is not None else SettingsModel()
    defaults = Settings()
    settings = Settings(
        log_format=resolve_with_precedence(
            cli_value=cli.log_format,
            env_value=env.log_format,
            config_value=file_settings.log_format,
            default=defaults.log_format,
        ),
        log_level=resolve_with_precedence(
            cli_value=cli.log_level,
            env_value=env.log_level,
            config_value=file_settings.log_level,
            default=defaults.log_level,
        ),
        current_year=resolve_with_precedence(
            cli_value=cli.current_year,
            env_value=env.current_year,
            config_value=file_settings.current_year,
            default=defaults.current_year,
        ),
    )
    logger.debug(
        "Resolved settings from %s",
        path if path is not None else "defaults",
        extra=structured_extra(
            component=LogComponent.CONFIG,
            operation="load_settings",
            details={"path": str(path) if path is not None else None},
        ),
    )
    return LoadedSettings(settings=settings, path=path)


__all__ = [
    "CONFIG_FILENAMES",
    "CURRENT_YEAR_ENV",
    "LoadedSettings",
    "discover_config",
    "load_settings",
    "load_settings_file",
    "settings_from_env",
]
