# topmark:header:start
#
#   project      : Pastex
#   file         : main.py
#   file_relpath : src/pastex/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pastex command line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Commands read SOURCE (a file, or stdin by default) and write to stdout.
- Internal logging is configured from the ``PASTEX_LOG_LEVEL`` environment variable,
  independently of the ``-v``/``-q`` program-output verbosity.
"""

from __future__ import annotations

import click

from pastex.cli.commands.detect import detect_command
from pastex.cli.commands.formats import formats_command
from pastex.cli.commands.minify import minify_command
from pastex.cli.commands.prettify import prettify_command
from pastex.cli.commands.validate import validate_command
from pastex.cli.commands.version import version_command
from pastex.cli.console import ClickConsole
from pastex.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
    verbosity_to_detail,
)
from pastex.codecs import register_all_codecs
from pastex.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)

register_all_codecs()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = verbosity_to_detail(resolve_verbosity(verbose, quiet))

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Pastex: detect, validate, prettify and minify pasted text.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Pastex CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'pastex detect FILE' or pipe text into 'pastex prettify'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(formats_command)

cli.add_command(detect_command)

cli.add_command(validate_command)

cli.add_command(prettify_command)

cli.add_command(minify_command)

if __name__ == "__main__":
    cli()
