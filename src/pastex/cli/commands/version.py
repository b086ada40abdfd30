# topmark:header:start
#
#   project      : Pastex
#   file         : version.py
#   file_relpath : src/pastex/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex `version` command.

Prints the current Pastex version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from pastex.cli.cmd_common import get_console, get_effective_verbosity
from pastex.cli.options import OutputFormat, output_format_option
from pastex.constants import PASTEX_VERSION


@click.command(
    name="version",
    help="Show the current version of Pastex.",
)
@output_format_option()
def version_command(*, output_format: str) -> None:
    """Show the current version of Pastex."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = OutputFormat(output_format.lower())

    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": PASTEX_VERSION}))
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# Pastex Version\n")
        console.print(f"**Pastex version: {PASTEX_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Pastex version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PASTEX_VERSION, bold=True)}")
    else:
        console.print(console.styled(PASTEX_VERSION, bold=True))
