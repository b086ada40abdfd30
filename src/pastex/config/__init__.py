# topmark:header:start
#
#   project      : Pastex
#   file         : __init__.py
#   file_relpath : src/pastex/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Pastex.

Holds the immutable `RenderOptions` consumed by the serializers, the TOML loader
that reads them from ``pastex.toml`` or ``[tool.pastex]`` in ``pyproject.toml``,
and the logging setup shared by the library and the CLI.
"""

from __future__ import annotations

from pastex.config.model import DEFAULT_RENDER_OPTIONS, RenderOptions

__all__ = ["DEFAULT_RENDER_OPTIONS", "RenderOptions"]
