# licensemark:header:start
#
#   project      : LicenseMark
#   file         : exit_codes.py
#   file_relpath : src/licensemark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Exit codes for the LicenseMark CLI.

LicenseMark aligns with the BSD `sysexits` convention where practical, so that
build tooling can interpret failures consistently. The one deliberate
divergence is `WOULD_CHANGE=2`, returned by ``check`` when headers are missing
or stale; Click also uses 2 for its own usage errors, so tests must assert
``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LicenseMark CLI.

    Attributes:
        SUCCESS: Every file is compliant (check) or was brought up to date (apply).
        FAILURE: Some file could not be processed (I/O error, unparseable header).
        WOULD_CHANGE: ``check`` found missing or stale headers.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error outside per-file processing. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing, invalid or ambiguous configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
