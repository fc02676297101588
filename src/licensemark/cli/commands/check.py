# licensemark:header:start
#
#   project      : LicenseMark
#   file         : check.py
#   file_relpath : src/licensemark/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark `check` command.

Reports files whose license header is missing, stale or unparseable without
touching them.

Examples:
  Check the whole tree and print a summary:

    $ licensemark check --summary

  Emit a JSON report for CI:

    $ licensemark check --format json src
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
    name="check",
    help="Verify license headers (read-only).",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Exits with 0 when every file is compliant, 2 when headers are missing or
stale and 1 when a header cannot be parsed or a file cannot be read.
""",
)
@common_run_options
def check_command(
    *,
    paths: tuple[Path, ...],
    config_path: Path | None,
    exclude_patterns: tuple[str, ...],
    workers: int | None,
    debug: bool,
    output_format: str,
    summary_mode: bool,
) -> None:
    """Verify license headers without modifying files.

    Args:
        paths (tuple[Path, ...]): Files, directories or globs (default ``.``).
        config_path (Path | None): Explicit configuration file.
        exclude_patterns (tuple[str, ...]): Extra exclude patterns.
        workers (int | None): Worker thread count override.
        debug (bool): Emit the per-file decision trace.
        output_format (str): ``text`` or ``json``.
        summary_mode (bool): Print counts instead of per-file lines.
    """
    run_engine(
        click.get_current_context(),
        RunMode.CHECK,
        paths=paths,
        config_path=config_path,
        exclude_patterns=exclude_patterns,
        workers=workers,
        debug=debug,
        output_format=output_format,
        summary_mode=summary_mode,
    )
