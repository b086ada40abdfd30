# topmark:header:start
#
#   project      : Pastex
#   file         : repair.py
#   file_relpath : src/pastex/repair.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YAML indentation repair.

Fixes exactly one authoring mistake: a ``key: value`` line followed by a more
deeply indented line that is also shaped like ``key: value``. A YAML parser
rejects this because a scalar cannot have children; the usual cause is content
pasted with inconsistent re-indentation. The fix dedents the offending line to
the scalar's column so it becomes a sibling::

    a: 1            a: 1
        b: 2   ->   b: 2

Everything else (tab/space mixing, missing colons, broken quoting) is left
untouched.

Invariants:
    * Total: never raises.
    * Line-count preserving: one input line yields exactly one output line. Lines
      are split on ``\\r?\\n`` and rejoined with ``\\n``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from pastex.config.logging import get_logger

if TYPE_CHECKING:
    from pastex.config.logging import PastexLogger

logger: PastexLogger = get_logger(__name__)

_LINE_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")
_INDENT_RE: Final[re.Pattern[str]] = re.compile(r"^(\s*)(.*)$", re.DOTALL)

_KEY: Final[str] = r"""(?:"[^"]*"|'[^']*'|[\w-]+)"""
# ``key:`` followed by whitespace (something follows on the line)
_KEY_PAIR_RE: Final[re.Pattern[str]] = re.compile(rf"^{_KEY}:\s")
# ``key: value`` where value does not open a block scalar (``|`` or ``>``)
_TERMINAL_SCALAR_RE: Final[re.Pattern[str]] = re.compile(rf"^{_KEY}:[ \t]+[^|>\s].*$")
# ``key:`` with nothing after it, or a list item
_BLOCK_OPENER_RE: Final[re.Pattern[str]] = re.compile(rf"^(?:{_KEY}:\s*$|-(?:\s|$))")


def _is_terminal_scalar(content: str) -> bool:
    return _TERMINAL_SCALAR_RE.match(content) is not None


def repair_indent(text: str) -> str:
    """Dedent scalar-shaped lines that are over-indented beneath a scalar.

    Args:
        text (str): YAML-ish text, possibly invalid.

    Returns:
        str: The text with every offending line moved to its scalar parent's
            indentation. Other lines are returned unchanged.
    """
    lines: list[str] = _LINE_SPLIT_RE.split(text)
    result: list[str] = []

    # Indentation of the most recent terminal ``key: value`` line, or None.
    last_scalar_indent: int | None = None
    repaired: int = 0

    for lineno, line in enumerate(lines, start=1):
        stripped: str = line.strip()
        if not stripped or stripped.startswith("#"):
            result.append(line)
            continue

        match = _INDENT_RE.match(line)
        # _INDENT_RE matches any string; the guard keeps type checkers quiet.
        indent_str, content = match.groups() if match else ("", line)
        indent: int = len(indent_str)

        if (
            last_scalar_indent is not None
            and indent > last_scalar_indent
            and _KEY_PAIR_RE.match(content)
        ):
            result.append(" " * last_scalar_indent + content)
            repaired += 1
            logger.trace(
                "Line %d: dedented from column %d to %d", lineno, indent, last_scalar_indent
            )
            if not _is_terminal_scalar(content):
                # ``key: |`` and friends: its continuation lines are legitimately deeper.
                last_scalar_indent = None
            continue

        result.append(line)

        if _is_terminal_scalar(content):
            last_scalar_indent = indent
        elif _BLOCK_OPENER_RE.match(content):
            last_scalar_indent = None
        elif last_scalar_indent is not None and indent <= last_scalar_indent:
            last_scalar_indent = None

    if repaired:
        logger.debug("Repaired %d over-indented line(s)", repaired)
    return "\n".join(result)
