# licensemark:header:start
#
#   project      : LicenseMark
#   file         : main.py
#   file_relpath : src/licensemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

import click

from licensemark.cli.commands.apply import apply_command
from licensemark.cli.commands.check import check_command
from licensemark.cli.commands.formats import formats_command
from licensemark.cli.commands.version import version_command
from licensemark.cli.console import ClickConsole
from licensemark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from licensemark.config.logging import (
    LicenseMarkLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger: LicenseMarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LicenseMark: insert, verify and update license headers.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the LicenseMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'licensemark check [PATHS...]' to verify headers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(apply_command)

cli.add_command(formats_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
