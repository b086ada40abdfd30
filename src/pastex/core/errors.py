# topmark:header:start
#
#   project      : Pastex
#   file         : errors.py
#   file_relpath : src/pastex/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the Pastex core.

Usage:
    Codecs raise `ParseError` when a format-specific parser rejects the text and
    `SerializeError` when a value cannot be expressed in the target format. The
    dispatch layer absorbs `SerializeError` (see `pastex.dispatch.stringify`);
    `ParseError` is converted into a `ValidationOutcome` by
    `pastex.api.classify_and_parse`. Neither crosses the public API boundary.

    CLI-facing errors live in `pastex.cli.errors` and wrap these.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pastex.formats.base import FormatId


class PastexError(Exception):
    """Base class for all Pastex domain errors."""


class ParseError(PastexError):
    """A format-specific parser rejected the input.

    Attributes:
        format (FormatId): The format the text was parsed as.
        message (str): The native parser diagnostic, verbatim.
    """

    def __init__(self, format: FormatId, message: str) -> None:  # noqa: A002
        super().__init__(message)
        self.format = format
        self.message = message

    def __str__(self) -> str:
        return self.message


class SerializeError(PastexError):
    """A value cannot be rendered in the requested format."""

    def __init__(self, format: FormatId, message: str) -> None:  # noqa: A002
        super().__init__(message)
        self.format = format
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(PastexError):
    """A configuration file is unreadable, malformed, or holds values of the wrong type."""
