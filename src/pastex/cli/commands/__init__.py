# topmark:header:start
#
#   project      : Pastex
#   file         : __init__.py
#   file_relpath : src/pastex/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex CLI commands, one module per command."""
