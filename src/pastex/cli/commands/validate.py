# topmark:header:start
#
#   project      : Pastex
#   file         : validate.py
#   file_relpath : src/pastex/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex `validate` command.

Classifies (or takes ``--as``) the format of the input and parses it. Exits with
``INVALID_INPUT`` (65) when the parser rejects the text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from pastex.api import classify_and_parse
from pastex.cli.cmd_common import get_console, get_effective_verbosity, read_source
from pastex.cli.errors import PastexInvalidInputError
from pastex.cli.exit_codes import ExitCode
from pastex.cli.options import (
    OutputFormat,
    format_override_option,
    output_format_option,
    source_argument,
)

if TYPE_CHECKING:
    from pastex.core.outcomes import ValidationOutcome
    from pastex.formats.base import FormatId


@click.command(
    name="validate",
    help="Check that SOURCE parses as its detected (or given) format.",
)
@source_argument
@format_override_option
@output_format_option(OutputFormat.DEFAULT, OutputFormat.JSON)
def validate_command(
    *,
    source: str,
    explicit_format: FormatId | None,
    output_format: str,
) -> None:
    """Validate the input.

    Args:
        source (str): Input file path, or ``-`` for stdin.
        explicit_format (FormatId | None): Parse as this format instead of classifying.
        output_format (str): ``default`` or ``json``.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    outcome: ValidationOutcome = classify_and_parse(read_source(source), explicit_format)
    fmt: str = outcome.detected_format.value

    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        console.print(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False, default=str))
        if not outcome.is_valid:
            ctx.exit(ExitCode.INVALID_INPUT)
        return

    if not outcome.is_valid:
        raise PastexInvalidInputError(f"invalid {fmt}: {outcome.error_message}")
    if get_effective_verbosity(ctx) >= 0:
        console.print(f"{console.styled('valid', fg='green', bold=True)} {fmt}")
