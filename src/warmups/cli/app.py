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

"""CLI entry point and orchestration for warmups commands."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

from warmups import __version__
from warmups._infra.error_codes import error_code_for
from warmups._internal.exceptions import WarmupsError
from warmups._internal.logging_utils import (
    LOG_FORMATS,
    LOG_LEVELS,
    configure_logging,
    structured_extra,
)
from warmups.cli.commands import arrays as arrays_command
from warmups.cli.commands import cars as cars_command
from warmups.cli.commands import demo as demo_command
from warmups.cli.commands import records as records_command
from warmups.cli.commands import text as text_command
from warmups.cli.helpers import echo, register_argument
from warmups.config import ConfigValidationError, load_settings
from warmups.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from warmups.cli.types import CommandHandler
    from warmups.config import Settings

logger: logging.Logger = logging.getLogger("warmups.cli")

WARMUPS_VERSION: Final[str] = __version__
EXIT_USAGE_ERROR: Final[int] = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the warmups command-line interface.

    Parses arguments, resolves settings, configures logging, and dispatches to
    the selected command handler.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        Exit code from the executed command handler, or ``2`` when settings or
        command input are invalid.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"warmups {WARMUPS_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    try:
        loaded = load_settings(
            log_format=args.log_format,
            log_level=args.log_level,
            config_path=args.config,
        )
    except ConfigValidationError as exc:
        echo(f"[warmups] {error_code_for(exc)}: {exc}", err=True)
        return EXIT_USAGE_ERROR
    settings = loaded.settings
    _ = configure_logging(settings.log_format, log_level=settings.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    return _run_handler(handler, args, settings)


def _run_handler(handler: CommandHandler, args: argparse.Namespace, settings: Settings) -> int:
    try:
        exit_code = handler(args, settings)
    except WarmupsError as exc:
        code = error_code_for(exc)
        logger.error(  # noqa: TRY400
            "%s: %s",
            code,
            exc,
            extra=structured_extra(
                component=LogComponent.CLI,
                operation=args.command,
                exit_code=EXIT_USAGE_ERROR,
                error_code=code,
            ),
        )
        return EXIT_USAGE_ERROR
    logger.debug(
        "Command %s finished",
        args.command,
        extra=structured_extra(component=LogComponent.CLI, operation=args.command, exit_code=exit_code),
    )
    return exit_code


def _build_parser() -> argparse.ArgumentParser:
    """Build and configure the main argument parser for the warmups CLI.

    Returns:
        Fully configured argument parser ready to parse CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="warmups",
        description="Run the warmups exercises from the command line.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Logging output format (default: WARMUPS_LOG_FORMAT, settings file, or text).",
    )
    register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging verbosity (default: WARMUPS_LOG_LEVEL, settings file, or info).",
    )
    register_argument(
        parser,
        "--config",
        type=Path,
        default=None,
        help="Settings file to use instead of discovering warmups.toml in the working directory.",
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the warmups version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    arrays_command.register_arrays_commands(subparsers)
    text_command.register_count_command(subparsers)
    records_command.register_property_command(subparsers)
    cars_command.register_car_age_command(subparsers)
    demo_command.register_demo_command(subparsers)
    return parser


def _command_handlers() -> dict[str, CommandHandler]:
    """Return a mapping of command names to their handler functions."""
    return {
        "car-age": cars_command.execute_car_age,
        "count": text_command.execute_count,
        "dedupe": arrays_command.execute_dedupe,
        "demo": demo_command.execute_demo,
        "property": records_command.execute_property,
        "sum": arrays_command.execute_sum,
    }


__all__ = ["main"]
