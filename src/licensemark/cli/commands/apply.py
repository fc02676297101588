# licensemark:header:start
#
#   project      : LicenseMark
#   file         : apply.py
#   file_relpath : src/licensemark/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark `apply` command.

Inserts missing license headers and replaces stale ones in place. Files whose
header comment is never closed are left alone and reported as failed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licensemark.cli.cmd_common import run_engine
from licensemark.cli.options import CONTEXT_SETTINGS, common_run_options
from licensemark.engine.report import RunMode

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="apply",
    help="Insert missing and update stale license headers in place.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Exits with 0 when every file is compliant afterwards and 1 when some file
could not be read, written or parsed.
""",
)
@common_run_options
def apply_command(
    *,
    paths: tuple[Path, ...],
    config_path: Path | None,
    exclude_patterns: tuple[str, ...],
    workers: int | None,
    debug: bool,
    output_format: str,
    summary_mode: bool,
) -> None:
    """Rewrite files so their license header matches the configured template."""
    run_engine(
        click.get_current_context(),
        RunMode.APPLY,
        paths=paths,
        config_path=config_path,
        exclude_patterns=exclude_patterns,
        workers=workers,
        debug=debug,
        output_format=output_format,
        summary_mode=summary_mode,
    )
