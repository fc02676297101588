# licensemark:header:start
#
#   project      : LicenseMark
#   file         : cmd_common.py
#   file_relpath : src/licensemark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Plumbing shared by the ``check`` and ``apply`` commands.

Builds the configuration, expands the inputs, runs the driver, renders the
report and maps the outcome to an exit code.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from licensemark.cli.errors import (
    LicenseMarkConfigError,
    LicenseMarkFileNotFoundError,
    LicenseMarkIOError,
)
from licensemark.cli.exit_codes import ExitCode
from licensemark.cli.options import OutputFormat
from licensemark.config.loader import load_config
from licensemark.config.logging import (
    LicenseMarkLogger,
    enable_debug_tracing,
    env_debug_enabled,
    get_logger,
)
from licensemark.core.errors import ConfigError
from licensemark.engine.context import GitContextFactory
from licensemark.engine.decision import Decision
from licensemark.engine.driver import LicenseDriver
from licensemark.engine.report import FileState, RunMode
from licensemark.file_resolver import expand_paths
from licensemark.rules.resolver import RuleResolver

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from licensemark.cli.console import ClickConsole
    from licensemark.config.model import Config, MutableConfig
    from licensemark.engine.report import FileOutcome, RunReport

logger: LicenseMarkLogger = get_logger(__name__)

_COUNT_STYLES: dict[str, str] = {
    "unchanged": "green",
    "inserted": "green",
    "replaced": "green",
    "missing": "blue",
    "stale": "yellow",
    "unparseable": "red",
    "failed": "bright_red",
    "skipped": "white",
}


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the group context."""
    obj = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def build_config(
    *,
    config_path: Path | None,
    exclude_patterns: Sequence[str],
    workers: int | None,
    debug: bool,
) -> Config:
    """Load the configuration, apply CLI overrides and freeze it.

    Raises:
        LicenseMarkConfigError: If the configuration is missing or invalid.
    """
    try:
        draft: MutableConfig = load_config(config_path)
        draft.apply_overrides(
            exclude=exclude_patterns,
            workers=workers,
            debug=debug or env_debug_enabled(),
        )
        config: Config = draft.freeze()
    except ConfigError as exc:
        raise LicenseMarkConfigError(str(exc)) from exc

    if config.debug:
        enable_debug_tracing()
    logger.trace("Effective configuration: %s", config)
    return config


def collect_files(paths: Sequence[Path]) -> list[Path]:
    """Expand the positional paths (default ``.``) into files.

    Raises:
        LicenseMarkFileNotFoundError: If an input matches nothing.
        LicenseMarkIOError: If a directory cannot be listed.
    """
    try:
        expanded = expand_paths(paths or ["."])
    except OSError as exc:
        raise LicenseMarkIOError(f"Cannot list input files: {exc}") from exc
    if expanded.missing:
        raise LicenseMarkFileNotFoundError(
            f"No such file or directory: {', '.join(expanded.missing)}"
        )
    return expanded.files


def build_driver(config: Config) -> LicenseDriver:
    """Wire the resolver and the git-backed context factory into a driver."""
    resolver = RuleResolver(config.rules, root=config.root, exclude=config.exclude)
    contexts = GitContextFactory(config.root, project_creation_year=config.project_creation_year)
    return LicenseDriver(resolver, contexts, workers=config.workers)


def exit_code_for(report: RunReport) -> ExitCode:
    """Map a report to the process exit code.

    Failures and unparseable headers need a human and yield ``FAILURE``;
    missing or stale headers found by ``check`` yield ``WOULD_CHANGE``.
    """
    if report.failures or any(o.decision is Decision.UNPARSEABLE for o in report.violations):
        return ExitCode.FAILURE
    if report.violations:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


def _outcome_line(console: ClickConsole, outcome: FileOutcome) -> str:
    label: str = outcome.state.styled(console.enable_color)
    detail: str = ""
    if outcome.decision is not None and outcome.state is not FileState.UNCHANGED:
        detail = f" ({outcome.decision.styled(console.enable_color)})"
    if outcome.message:
        detail += f": {outcome.message}"
    return f"{outcome.path}: {label}{detail}"


def render_text_report(
    console: ClickConsole,
    report: RunReport,
    *,
    summary_mode: bool,
    verbosity: int,
) -> None:
    """Print the human-readable report.

    Without ``--summary`` one line is printed per file that needs attention
    or was rewritten; ``-v`` adds compliant and skipped files plus mismatch
    details.
    """
    if not summary_mode and verbosity >= 0:
        for outcome in report.outcomes:
            quiet_state = outcome.state in (FileState.UNCHANGED, FileState.SKIPPED)
            if quiet_state and verbosity < 1:
                continue
            console.print(_outcome_line(console, outcome))
            if verbosity >= 1:
                for error in outcome.errors:
                    console.print(console.styled(f"    {error}", fg="yellow"))
        if report.mode is RunMode.CHECK and report.violations:
            console.print(
                console.styled(
                    "Run 'licensemark apply' to fix missing and stale headers.", dim=True
                )
            )

    counts: dict[str, int] = report.counts()
    if summary_mode or verbosity >= 1:
        console.print()
        console.print(console.styled("Summary by outcome:", bold=True, underline=True))
        width: int = max(len(key) for key in counts) + 1
        for key, n in counts.items():
            console.print(console.styled(f"  {key:<{width}}: {n}", fg=_COUNT_STYLES[key]))
    elif verbosity >= 0:
        total: int = report.processed
        console.print(
            console.styled(
                f"{report.mode.value}: {total} file(s) processed, "
                f"{len(report.violations)} need attention.",
                bold=True,
                fg="green" if report.ok else "yellow",
            )
        )


def run_engine(
    ctx: click.Context,
    mode: RunMode,
    *,
    paths: Sequence[Path],
    config_path: Path | None,
    exclude_patterns: Sequence[str],
    workers: int | None,
    debug: bool,
    output_format: str,
    summary_mode: bool,
) -> None:
    """Run ``check`` or ``apply`` end to end and exit with the mapped code.

    Raises:
        LicenseMarkConfigError: On configuration errors and rule ambiguity.
        LicenseMarkFileNotFoundError: If an input path does not exist.
    """
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: Config = build_config(
        config_path=config_path,
        exclude_patterns=exclude_patterns,
        workers=workers,
        debug=debug,
    )
    files: list[Path] = collect_files(paths)
    driver: LicenseDriver = build_driver(config)

    try:
        report: RunReport = driver.run(files, mode)
    except ConfigError as exc:
        raise LicenseMarkConfigError(str(exc)) from exc

    if OutputFormat(output_format) is OutputFormat.JSON:
        console.print(json.dumps(report.to_dict(), indent=2))
    else:
        render_text_report(
            console,
            report,
            summary_mode=summary_mode,
            verbosity=get_effective_verbosity(ctx),
        )

    code: ExitCode = exit_code_for(report)
    if code is not ExitCode.SUCCESS:
        ctx.exit(code)
