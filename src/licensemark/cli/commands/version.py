# licensemark:header:start
#
#   project      : LicenseMark
#   file         : version.py
#   file_relpath : src/licensemark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark `version` command.

Prints the LicenseMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from licensemark.cli.cmd_common import get_effective_verbosity
from licensemark.cli.options import OutputFormat
from licensemark.constants import LICENSEMARK_VERSION

if TYPE_CHECKING:
    from licensemark.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of LicenseMark.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([v.value for v in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format (text or json).",
)
def version_command(*, output_format: str) -> None:
    """Show the current version of LicenseMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if OutputFormat(output_format) is OutputFormat.JSON:
        console.print(json.dumps({"version": LICENSEMARK_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("LicenseMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(LICENSEMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(LICENSEMARK_VERSION, bold=True))
