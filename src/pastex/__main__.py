# topmark:header:start
#
#   project      : Pastex
#   file         : __main__.py
#   file_relpath : src/pastex/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Pastex via ``python -m pastex``.

Equivalent to running the ``pastex`` console script.

Examples:
    Detect the format of a file::

        python -m pastex detect settings.ini
"""

from __future__ import annotations

from pastex.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
