# topmark:header:start
#
#   project      : Pastex
#   file         : minify.py
#   file_relpath : src/pastex/cli/commands/minify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex `minify` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pastex.api import classify_and_parse, compact
from pastex.cli.cmd_common import get_console, read_source
from pastex.cli.options import format_override_option, source_argument

if TYPE_CHECKING:
    from pastex.formats.base import FormatId


@click.command(
    name="minify",
    help="Strip insignificant whitespace (and comments) from SOURCE.",
    epilog="JSON, XML, HTML and SQL are minified; other formats are printed unchanged.",
)
@source_argument
@format_override_option
def minify_command(*, source: str, explicit_format: FormatId | None) -> None:
    """Minify the input and print it to stdout."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    text: str = read_source(source)
    result: str = compact(text, classify_and_parse(text, explicit_format))
    if result:
        console.print(result.rstrip("\n"))
