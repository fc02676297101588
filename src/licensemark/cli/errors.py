# licensemark:header:start
#
#   project      : LicenseMark
#   file         : errors.py
#   file_relpath : src/licensemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Exceptions for the LicenseMark CLI.

Raise these from commands to stop with a standardized message and exit code.
They print through the project console when one is present on the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from licensemark.cli.exit_codes import ExitCode


class LicenseMarkCliError(click.ClickException):
    """Base class for all LicenseMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None)
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class LicenseMarkUsageError(LicenseMarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LicenseMarkConfigError(LicenseMarkCliError):
    """Error for configuration errors (missing/invalid/ambiguous config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LicenseMarkFileNotFoundError(LicenseMarkCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LicenseMarkIOError(LicenseMarkCliError):
    """Error for I/O errors outside per-file processing."""

    exit_code = ExitCode.IO_ERROR
