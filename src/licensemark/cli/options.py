# licensemark:header:start
#
#   project      : LicenseMark
#   file         : options.py
#   file_relpath : src/licensemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Common CLI options and their resolution logic.

Reusable option decorators (verbosity, color, run options) live here so that
the group and the commands stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from licensemark.cli.errors import LicenseMarkUsageError
from licensemark.config.logging import TRACE_LEVEL, LicenseMarkLogger, get_logger

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

logger: LicenseMarkLogger = get_logger(__name__)

#: Click context settings shared by commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


class OutputFormat(str, Enum):
    """Report output format."""

    TEXT = "text"
    JSON = "json"


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: Positive for more detail, negative for less, 0 by default.

    Raises:
        LicenseMarkUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LicenseMarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return min(verbose_count, 2)
    if quiet_count:
        return -min(quiet_count, 2)
    return 0


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Machine formats never get color. Explicit ``--color`` wins, then
    ``FORCE_COLOR`` / ``NO_COLOR``, then whether stdout is a TTY.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from the CLI.
        output_format (str | None): Output format name, e.g. "json".
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if color output should be enabled.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (mutually exclusive, counted)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_run_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options shared by ``check`` and ``apply``.

    Adds ``--config``, ``--exclude``, ``--workers``, ``--debug``, ``--format``
    and ``--summary``, plus the ``PATHS`` argument.
    """
    f = click.argument(
        "paths",
        nargs=-1,
        type=click.Path(path_type=Path),
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (default: licensemark.toml or pyproject.toml in the cwd).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Extra gitignore-style exclude pattern (repeatable).",
    )(f)
    f = click.option(
        "--workers",
        "-j",
        type=click.IntRange(min=1),
        default=None,
        help="Number of worker threads.",
    )(f)
    f = click.option(
        "--debug",
        is_flag=True,
        help="Log the decision trace of every file.",
    )(f)
    f = click.option(
        "--format",
        "output_format",
        type=click.Choice([v.value for v in OutputFormat]),
        default=OutputFormat.TEXT.value,
        help="Output format (text or json).",
    )(f)
    f = click.option(
        "--summary",
        "summary_mode",
        is_flag=True,
        help="Show outcome counts instead of per-file details.",
    )(f)
    return f
