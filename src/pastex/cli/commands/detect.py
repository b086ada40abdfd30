# topmark:header:start
#
#   project      : Pastex
#   file         : detect.py
#   file_relpath : src/pastex/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex `detect` command.

Prints the format identifier the classifier assigns to the input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pastex.api import classify, lookup_format_metadata
from pastex.cli.cmd_common import get_console, get_effective_verbosity, read_source
from pastex.cli.options import source_argument

if TYPE_CHECKING:
    from pastex.formats.base import FormatDefinition, FormatId


@click.command(
    name="detect",
    help="Detect the format of SOURCE (a file, or '-' for stdin).",
)
@source_argument
def detect_command(*, source: str) -> None:
    """Print the detected format; with ``-v`` also its display name and category."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    format_id: FormatId = classify(read_source(source))
    if get_effective_verbosity(ctx) > 0:
        meta: FormatDefinition = lookup_format_metadata(format_id)
        console.print(
            f"{console.styled(format_id.value, bold=True)}\t{meta.display_name}"
            f"\t{meta.category.value}"
        )
    else:
        console.print(format_id.value)
