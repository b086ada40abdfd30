# topmark:header:start
#
#   project      : Pastex
#   file         : prettify.py
#   file_relpath : src/pastex/cli/commands/prettify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex `prettify` command.

Reformats the input. A parsed value is re-serialized; text that does not parse
goes through the format's text path (YAML indentation repair, or returned
unchanged), so the command always prints something.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pastex.api import classify_and_parse, prettify
from pastex.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    read_source,
    resolve_render_options,
)
from pastex.cli.options import config_options, format_override_option, source_argument

if TYPE_CHECKING:
    from pastex.config.model import RenderOptions
    from pastex.core.outcomes import ValidationOutcome
    from pastex.formats.base import FormatId


@click.command(
    name="prettify",
    help="Pretty-print SOURCE in its detected (or given) format.",
)
@source_argument
@format_override_option
@config_options
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Override the indent.")
@click.option(
    "--sort-keys/--no-sort-keys",
    default=None,
    help="Sort mapping keys in JSON and YAML output.",
)
def prettify_command(
    *,
    source: str,
    explicit_format: FormatId | None,
    config_path: str | None,
    no_config: bool,
    indent: int | None,
    sort_keys: bool | None,
) -> None:
    """Prettify the input and print it to stdout."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    options: RenderOptions = resolve_render_options(config_path=config_path, no_config=no_config)
    if indent is not None:
        options = options.replace(indent=indent)
    if sort_keys is not None:
        options = options.replace(sort_keys=sort_keys)

    text: str = read_source(source)
    outcome: ValidationOutcome = classify_and_parse(text, explicit_format)
    if not outcome.is_valid and get_effective_verbosity(ctx) >= 0:
        console.warn(
            f"Input is not valid {outcome.detected_format.value}; output is best effort: "
            f"{outcome.error_message}"
        )
    result: str = prettify(text, outcome, options)
    if result:
        console.print(result.rstrip("\n"))
