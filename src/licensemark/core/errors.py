# licensemark:header:start
#
#   project      : LicenseMark
#   file         : errors.py
#   file_relpath : src/licensemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Domain exceptions for LicenseMark.

These exceptions are independent of the CLI. The CLI maps them to
`licensemark.cli.errors` exceptions (and thereby to exit codes); library
callers can catch them directly.

Per-file problems (unreadable files, malformed headers) are *not* raised:
they are recorded on the file's outcome so that a run always completes a full
pass. Only problems that invalidate the whole run are exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


class LicenseMarkError(Exception):
    """Base class for all LicenseMark errors."""


class ConfigError(LicenseMarkError):
    """Invalid, unreadable or inconsistent configuration."""


class HeaderTemplateError(ConfigError):
    """A license template could not be parsed.

    Args:
        message (str): Human-readable description of the problem.
        line (int | None): Zero-based index of the offending template line, if known.
        source (str | None): Name of the template (rule name or file path), if known.
    """

    def __init__(self, message: str, *, line: int | None = None, source: str | None = None) -> None:
        self.line = line
        self.source = source
        where = ""
        if source is not None:
            where = f"{source}"
            if line is not None:
                where += f":{line + 1}"
            where += ": "
        super().__init__(f"{where}{message}")


class RuleAmbiguityError(ConfigError):
    """More than one rule matched the same file.

    Attributes:
        paths (Mapping[Path, tuple[str, ...]]): Each ambiguous path with the names
            of all rules that matched it.
    """

    def __init__(self, paths: Mapping[Path, tuple[str, ...]]) -> None:
        self.paths = dict(paths)
        details = "; ".join(
            f"{path} ({', '.join(names)})" for path, names in sorted(self.paths.items())
        )
        super().__init__(f"{len(self.paths)} file(s) matched more than one rule: {details}")
