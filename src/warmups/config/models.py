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

"""Settings models and validation errors for warmups.

Raw settings from TOML files, environment variables, and CLI flags are
validated by the pydantic ``SettingsModel``. Every field is optional there so
that partial sources can be layered; the merged result is the frozen
``Settings`` dataclass used at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import BaseModel, ConfigDict, field_validator

from warmups._internal.exceptions import WarmupsValidationError
from warmups.cars import DEFAULT_CLOCK, FixedClock
from warmups.core.model_types import LogFormat, LogLevel

if TYPE_CHECKING:
    from pathlib import Path

    from warmups.cars import Clock

LOG_FORMAT_CHOICES: Final[tuple[str, ...]] = tuple(item.value for item in LogFormat)
LOG_LEVEL_CHOICES: Final[tuple[str, ...]] = tuple(item.value for item in LogLevel)


class ConfigValidationError(WarmupsValidationError):
    """Raised when settings contain invalid values."""


class ConfigFieldChoiceError(ConfigValidationError):
    """Raised when a settings field is given an unsupported value."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        """Initialise the exception with the field name and allowed values.

        Args:
            field: Name of the settings field with an invalid value.
            allowed: Values accepted for this field.
        """
        self.field = field
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"{field} must be one of: {allowed_text}")


class ConfigReadError(ConfigValidationError):
    """Raised when a settings file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a settings file fails schema validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid warmups settings in {path}: {error}")


class InvalidEnvironmentError(ConfigValidationError):
    """Raised when ``WARMUPS_*`` environment variables hold invalid values."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f"Invalid warmups environment settings: {error}")


class SettingsModel(BaseModel):
    """Pydantic model validating one source of raw settings.

    Attributes:
        log_format: Log output format (``text`` or ``json``).
        log_level: Log verbosity (``debug``, ``info``, ``warning``, ``error``).
        current_year: Year to pin the clock to; ``None`` reads the system date.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    log_format: LogFormat | None = None
    log_level: LogLevel | None = None
    current_year: int | None = None

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalise_log_format(cls, value: object) -> LogFormat | None:
        if value is None or isinstance(value, LogFormat):
            return value
        try:
            return LogFormat.from_str(str(value))
        except ValueError as exc:
            raise ConfigFieldChoiceError("log_format", LOG_FORMAT_CHOICES) from exc

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> LogLevel | None:
        if value is None or isinstance(value, LogLevel):
            return value
        try:
            return LogLevel.from_str(str(value))
        except ValueError as exc:
            raise ConfigFieldChoiceError("log_level", LOG_LEVEL_CHOICES) from exc


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved runtime settings.

    Attributes:
        log_format: Log output format.
        log_level: Log verbosity.
        current_year: Pinned year, or ``None`` to follow the system date.
    """

    log_format: LogFormat = LogFormat.TEXT
    log_level: LogLevel = LogLevel.INFO
    current_year: int | None = None

    def clock(self) -> Clock:
        """Return the clock these settings select."""
        if self.current_year is None:
            return DEFAULT_CLOCK
        return FixedClock(self.current_year)


__all__ = [
    "LOG_FORMAT_CHOICES",
    "LOG_LEVEL_CHOICES",
    "ConfigFieldChoiceError",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "InvalidEnvironmentError",
    "Settings",
    "SettingsModel",
]
