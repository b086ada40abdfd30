# topmark:header:start
#
#   project      : Pastex
#   file         : cmd_common.py
#   file_relpath : src/pastex/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
reading the input source, resolving render options, and rendering tables.
They translate domain errors into CLI errors but carry no output policy.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pastex.cli.errors import (
    PastexConfigError,
    PastexFileNotFoundError,
    PastexInvalidInputError,
    PastexIOError,
)
from pastex.config.loader import resolve_options
from pastex.config.logging import get_logger
from pastex.constants import STDIO_PLACEHOLDER
from pastex.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pastex.cli.console import ConsoleLike
    from pastex.config.logging import PastexLogger
    from pastex.config.model import RenderOptions

logger: PastexLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output detail level (0 terse, >0 verbose, <0 quiet)."""
    return int(ctx.obj.get("verbosity_level", 0)) if isinstance(ctx.obj, dict) else 0


def read_source(source: str) -> str:
    """Read the whole input text from a file path, or from stdin for ``-``.

    Raises:
        PastexFileNotFoundError: If the file does not exist.
        PastexInvalidInputError: If the bytes are not valid UTF-8.
        PastexIOError: If reading fails.
    """
    name: str = "<stdin>" if source == STDIO_PLACEHOLDER else source
    try:
        if source == STDIO_PLACEHOLDER:
            text: str = click.get_text_stream("stdin", encoding="utf-8").read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PastexFileNotFoundError(f"Input file not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise PastexInvalidInputError(f"{name}: input is not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise PastexIOError(f"{name}: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), name)
    return text


def resolve_render_options(*, config_path: str | None, no_config: bool) -> RenderOptions:
    """Resolve render options for a command, mapping failures onto CLI errors.

    Raises:
        PastexFileNotFoundError: If ``config_path`` does not exist.
        PastexConfigError: If the config file is unreadable or invalid.
    """
    path: Path | None = Path(config_path) if config_path else None
    if path is not None and not no_config and not path.is_file():
        raise PastexFileNotFoundError(f"Config file not found: {path}")
    try:
        return resolve_options(config_path=path, no_config=no_config)
    except ConfigError as exc:
        raise PastexConfigError(str(exc)) from exc


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Rows, each as long as ``headers``.
        align (Mapping[int, str] | None): Column index to ``"left"`` (default),
            ``"right"`` or ``"center"``.

    Returns:
        str: The Markdown table, ending with a newline.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = widths[i]
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{c:<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    separator: str = "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"
    lines: list[str] = [_line(headers), separator]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"
