# topmark:header:start
#
#   project      : Pastex
#   file         : __init__.py
#   file_relpath : src/pastex/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex package.

Pastex takes pasted text, works out which format it is in (JSON, YAML, TOML,
XML, CSV, INI, ENV, JSON Lines, Markdown, HTML, SQL or plain text), parses it,
and renders it back pretty-printed or minified. A best-effort indentation
repair rescues YAML whose keys were pasted one level too deep.

The stable surface lives in [`pastex.api`][].
"""

from __future__ import annotations
