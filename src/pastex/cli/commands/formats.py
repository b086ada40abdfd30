# topmark:header:start
#
#   project      : Pastex
#   file         : formats.py
#   file_relpath : src/pastex/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex `formats` command.

Lists every format Pastex can detect, with its identifier and display name.
``--long`` adds the category, file extensions, MIME types and editor language.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from pastex.cli.cmd_common import get_console, render_markdown_table
from pastex.cli.options import OutputFormat, output_format_option
from pastex.constants import PASTEX_VERSION
from pastex.formats.registry import get_format_registry

if TYPE_CHECKING:
    from pastex.formats.base import FormatDefinition


def _serialize(meta: FormatDefinition, *, long: bool) -> dict[str, Any]:
    data: dict[str, Any] = {"id": meta.id.value, "name": meta.display_name}
    if long:
        data.update(
            {
                "category": meta.category.value,
                "extensions": list(meta.extensions),
                "mime_types": sorted(meta.mime_types),
                "editor_language": meta.editor_language,
                "structured": meta.is_structured,
            }
        )
    return data


@click.command(
    name="formats",
    help="List all supported formats.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (category, extensions, MIME types, editor language).",
)
@output_format_option()
def formats_command(*, show_details: bool = False, output_format: str) -> None:
    """List supported formats.

    Args:
        show_details (bool): Include category, extensions, MIME types and editor language.
        output_format (str): ``default``, ``json`` or ``markdown``.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    registry = get_format_registry()
    fmt: OutputFormat = OutputFormat(output_format.lower())

    if fmt is OutputFormat.JSON:
        payload = [_serialize(meta, long=show_details) for meta in registry.values()]
        console.print(json.dumps(payload, indent=2))
        return

    if fmt is OutputFormat.MARKDOWN:
        console.print("# Supported Formats\n")
        console.print(f"Pastex version **{PASTEX_VERSION}** detects the following formats:\n")
        if show_details:
            headers = ["Format", "Name", "Category", "Extensions", "MIME Types", "Editor"]
            rows = [
                [
                    f"`{meta.id.value}`",
                    meta.display_name,
                    meta.category.value,
                    ", ".join(meta.extensions),
                    ", ".join(sorted(meta.mime_types)),
                    meta.editor_language,
                ]
                for meta in registry.values()
            ]
        else:
            headers = ["Format", "Name"]
            rows = [[f"`{meta.id.value}`", meta.display_name] for meta in registry.values()]
        console.print(render_markdown_table(headers, rows))
        return

    # Plain text (default)
    width: int = max(len(fid.value) for fid in registry)
    for fid, meta in registry.items():
        line: str = f"{console.styled(fid.value.ljust(width), bold=True)}  {meta.display_name}"
        if show_details:
            line += (
                f"  [{meta.category.value}]  {' '.join(meta.extensions)}"
                f"  {', '.join(sorted(meta.mime_types))}"
            )
        console.print(line)
