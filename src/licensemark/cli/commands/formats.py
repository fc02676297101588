# licensemark:header:start
#
#   project      : LicenseMark
#   file         : formats.py
#   file_relpath : src/licensemark/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark `formats` command.

Lists the registered header formats with the file names and extensions they
are inferred for when a rule does not name a format.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from licensemark.cli.options import OutputFormat
from licensemark.formats import registered_formats

if TYPE_CHECKING:
    from licensemark.cli.console import ClickConsole
    from licensemark.formats.base import HeaderFormat


def _serialize(fmt: HeaderFormat) -> dict[str, Any]:
    return {
        "name": fmt.name,
        "description": fmt.description,
        "extensions": list(fmt.extensions),
        "filenames": list(fmt.filenames),
    }


@click.command(
    name="formats",
    help="List the supported header comment formats.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([v.value for v in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format (text or json).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show the extensions and file names of each format.",
)
def formats_command(*, output_format: str, show_details: bool) -> None:
    """List registered header formats.

    Args:
        output_format (str): ``text`` or ``json``.
        show_details (bool): Include extensions and file names.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    formats = sorted(registered_formats().values(), key=lambda f: f.name)

    if OutputFormat(output_format) is OutputFormat.JSON:
        console.print(json.dumps([_serialize(f) for f in formats], indent=2))
        return

    width: int = max(len(f.name) for f in formats)
    for fmt in formats:
        console.print(f"{console.styled(f'{fmt.name:<{width}}', bold=True)}  {fmt.description}")
        if show_details:
            if fmt.filenames:
                console.print(f"{'':<{width}}  files:      {', '.join(fmt.filenames)}")
            console.print(f"{'':<{width}}  extensions: {', '.join(fmt.extensions)}")
