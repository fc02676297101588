# licensemark:header:start
#
#   project      : LicenseMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""CLI test helpers for running LicenseMark in a controlled working directory.

`run_cli_in()` changes the process working directory to ``tmp_path`` before
invoking the Click CLI, so that configuration discovery, relative paths and
glob patterns resolve against the temporary project.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from licensemark.cli.exit_codes import ExitCode
from licensemark.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

MIT_CONFIG = '''\
[[rules]]
name = "java"
include = ["*.java"]
text = """
Copyright Example Corp.

Licensed under the MIT License.
"""
'''

MIT_JAVA_HEADER = (
    "/*\n * Copyright Example Corp.\n *\n * Licensed under the MIT License.\n */\n"
)


@pytest.fixture(autouse=True)
def restore_package_log_level() -> Iterator[None]:
    """Undo `--debug` tracing switched on by a CLI run."""
    package = logging.getLogger("licensemark")
    previous = package.level
    yield
    package.setLevel(previous)


def make_project(tmp_path: Path, config: str = MIT_CONFIG, **files: str) -> Path:
    """Write ``licensemark.toml`` and ``files`` (name -> content) into ``tmp_path``."""
    (tmp_path / "licensemark.toml").write_text(config, encoding="utf-8")
    for name, content in files.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
    return tmp_path


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["check", "."]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for commands that do not touch project files (``formats``,
    ``version``, ``--help``).
    """
    return CliRunner().invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that ``check`` found missing or stale headers (code 2)."""
    # WOULD_CHANGE is a normal outcome, not an exception
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the run reported failures (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
