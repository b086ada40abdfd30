# topmark:header:start
#
#   project      : Pastex
#   file         : constants.py
#   file_relpath : src/pastex/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PASTEX_VERSION: str = get_version("pastex")

# Default file name stem for exported documents.
DEFAULT_EXPORT_STEM: str = "pastex"

# Name of the stdin/stdout placeholder accepted by the CLI.
STDIO_PLACEHOLDER: str = "-"
