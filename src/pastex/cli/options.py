# topmark:header:start
#
#   project      : Pastex
#   file         : options.py
#   file_relpath : src/pastex/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Pastex CLI.

This module centralizes reusable options (verbosity, color, input source,
format override, configuration) and their resolution logic, so commands and
the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, TypeVar

import click

from pastex.cli.cli_types import EnumChoiceParam
from pastex.cli.errors import PastexUsageError
from pastex.config.logging import TRACE_LEVEL
from pastex.constants import STDIO_PLACEHOLDER
from pastex.formats.base import FormatId

F = TypeVar("F", bound=Callable[..., object])

# Program-output verbosity levels, mapped to standard logging levels
LOG_LEVELS: dict[str, int] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class OutputFormat(str, Enum):
    """Output format for report-style commands.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
      MARKDOWN: A Markdown document (tables where it makes sense).
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the ``-v``/``-q`` counts.

    Raises:
        PastexUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PastexUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


def verbosity_to_detail(level: int) -> int:
    """Map a resolved verbosity level onto a detail count (0 terse, >0 verbose, <0 quiet)."""
    if level >= logging.ERROR:
        return -1
    if level >= logging.WARNING:
        return 0
    if level >= logging.INFO:
        return 1
    return 2


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError, OSError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: F) -> F:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def source_argument(f: F) -> F:
    """Add the optional SOURCE argument (a file path, or ``-`` for stdin)."""
    return click.argument(
        "source",
        type=click.Path(dir_okay=False, allow_dash=True, path_type=str),
        default=STDIO_PLACEHOLDER,
        required=False,
    )(f)


def format_override_option(f: F) -> F:
    """Add ``--as FORMAT`` to skip classification."""
    return click.option(
        "--as",
        "explicit_format",
        type=EnumChoiceParam(FormatId),
        default=None,
        help=f"Treat the input as this format ({', '.join(v.value for v in FormatId)}).",
    )(f)


def config_options(f: F) -> F:
    """Add ``--config PATH`` and ``--no-config``."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read render options from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore pastex.toml and [tool.pastex] in pyproject.toml.",
    )(f)
    return f


def output_format_option(*choices: OutputFormat) -> Callable[[F], F]:
    """Add ``--output-format`` restricted to ``choices``."""
    allowed: tuple[OutputFormat, ...] = choices or tuple(OutputFormat)

    def decorator(f: F) -> F:
        return click.option(
            "--output-format",
            "output_format",
            type=click.Choice([c.value for c in allowed], case_sensitive=False),
            default=OutputFormat.DEFAULT.value,
            show_default=True,
            help="Output format for the report.",
        )(f)

    return decorator
