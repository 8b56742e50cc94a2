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

"""Structured logging utilities shared across warmups components."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Literal, SupportsInt, cast

from warmups.compat import UTC, NotRequired, TypedDict, Unpack, override
from warmups.core.model_types import LogComponent, LogFormat, LogLevel
from warmups.json import normalise_enums_for_json

ROOT_LOGGER_NAME: Final[str] = "warmups"
LOG_FORMAT_ENV: Final[str] = "WARMUPS_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "WARMUPS_LOG_LEVEL"

LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    "tuple[Literal['text', 'json'], ...]",
    tuple(format_.value for format_ in LogFormat),
)
LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = cast(
    "tuple[Literal['debug', 'info', 'warning', 'error'], ...]",
    tuple(level.value for level in LogLevel),
)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "operation",
    "count",
    "exit_code",
    "error_code",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "warmups.arrays",
    "warmups.text",
    "warmups.records",
    "warmups.cars",
    "warmups.config",
    "warmups.cli",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration for diagnostics and debugging."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render log records as structured JSON objects."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string.

        Args:
            record: Log record to serialise.

        Returns:
            JSON-formatted string containing standard and structured fields.
        """
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalise_enums_for_json(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter for CLI output."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _coerce_log_format(log_format: LogFormat | str) -> LogFormat:
    if isinstance(log_format, LogFormat):
        return log_format
    return LogFormat.from_str(log_format)


def _coerce_log_level(level: LogLevel | str | int) -> tuple[int, str]:
    if isinstance(level, int):
        return level, logging.getLevelName(level).lower()
    value = str(level).strip().lower()
    match value:
        case "debug":
            return logging.DEBUG, "debug"
        case "warning":
            return logging.WARNING, "warning"
        case "error":
            return logging.ERROR, "error"
        case _:
            return logging.INFO, "info"


def _select_format(preferred: LogFormat | str | None) -> LogFormat:
    if preferred is not None:
        return _coerce_log_format(preferred)
    env_value = os.getenv(LOG_FORMAT_ENV)
    return _coerce_log_format(env_value) if env_value else LogFormat.TEXT


def _select_level(level: LogLevel | str | int | None) -> tuple[int, str]:
    if level is not None:
        return _coerce_log_level(level)
    env_value = os.getenv(LOG_LEVEL_ENV)
    if env_value:
        return _coerce_log_level(env_value)
    return _coerce_log_level(LogLevel.INFO)


def _configure_handler(log_format: LogFormat) -> logging.Handler:
    handler = logging.StreamHandler()
    if log_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(TextLogFormatter())
    return handler


def _apply_child_levels(level: int, children: Iterable[str]) -> None:
    for child in children:
        logging.getLogger(child).setLevel(level)


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: LogLevel | str | int | None = None,
) -> LogConfig:
    """Configure warmups logging according to the requested format and level.

    Args:
        log_format: Desired log output format. ``None`` falls back to the
            ``WARMUPS_LOG_FORMAT`` environment variable or ``text``.
        log_level: Preferred verbosity (string or numeric). ``None`` consults
            ``WARMUPS_LOG_LEVEL`` or defaults to ``info``.

    Returns:
        A ``LogConfig`` describing the selected formatter and resolved numeric
        log level, which is also applied to the root and child loggers.
    """
    selected_format = _select_format(log_format)
    level_value, level_name = _select_level(log_level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(_configure_handler(selected_format))
    root_logger.setLevel(level_value)
    root_logger.propagate = False

    _apply_child_levels(level_value, CHILD_LOGGERS)
    return LogConfig(format=selected_format, level=level_value, level_name=level_name)


class StructuredLogExtra(TypedDict):
    """Structured logging extras accepted by warmups log records."""

    component: LogComponent
    operation: NotRequired[str]
    count: NotRequired[int]
    exit_code: NotRequired[int]
    error_code: NotRequired[str]
    details: NotRequired[Mapping[str, object]]


class _StructuredLogKwargs(TypedDict, total=False):
    operation: str
    count: int
    exit_code: int
    error_code: str
    details: Mapping[str, object]


def _to_int(value: object) -> int:
    return int(cast("SupportsInt | str | int", value))


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    ``None`` values and empty ``details`` mappings are dropped so the JSON
    formatter only emits fields that carry information.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (operation, count, exit code, etc.).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    payload = cast("dict[str, object]", kwargs)
    operation = payload.get("operation")
    if operation is not None:
        extra["operation"] = str(operation)
    count = payload.get("count")
    if count is not None:
        extra["count"] = _to_int(count)
    exit_code = payload.get("exit_code")
    if exit_code is not None:
        extra["exit_code"] = _to_int(exit_code)
    error_code = payload.get("error_code")
    if error_code is not None:
        extra["error_code"] = str(error_code)
    details = payload.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
