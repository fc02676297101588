# licensemark:header:start
#
#   project      : LicenseMark
#   file         : logging.py
#   file_relpath : src/licensemark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark logging with a TRACE level and chalk-colored output.

The TRACE level sits below DEBUG and carries the per-file decision trace
(which rule matched, where the header was found, why it was judged stale).
It is enabled with ``LICENSEMARK_LOG_LEVEL=TRACE`` or the ``debug`` switch.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from licensemark.constants import ENV_DEBUG, ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class LicenseMarkLogger(logging.Logger):
    """Logger with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional extra information passed
                to the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(LicenseMarkLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and colorize it by level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized log line.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Translate a level name ("TRACE", "debug") or number ("10") into a level.

    Returns:
        int | None: The logging level, or None when ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment, or None if unset.

    Honors ``LICENSEMARK_LOG_LEVEL`` (e.g. "TRACE", "DEBUG", numeric "10").
    """
    return parse_log_level(os.environ.get(ENV_LOG_LEVEL))


def env_debug_enabled() -> bool:
    """Return True when ``LICENSEMARK_DEBUG`` is set to a truthy value."""
    return os.environ.get(ENV_DEBUG, "").strip().lower() in {"1", "true", "yes", "on"}


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a level and colored output on stdout.

    If ``level`` is None the environment is consulted via
    `resolve_env_log_level`; the default is WARNING.

    Args:
        level (int | None): Explicit logging level.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop previous handlers to prevent duplicate messages on re-configuration
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> LicenseMarkLogger:
    """Retrieve a `LicenseMarkLogger` instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        LicenseMarkLogger: The logger instance.
    """
    logger = logging.getLogger(name)
    return cast("LicenseMarkLogger", logger)


def enable_debug_tracing() -> None:
    """Lower the ``licensemark`` loggers to TRACE so decision traces are emitted.

    Records propagate to the handlers installed by `setup_logging` regardless
    of the root logger level.
    """
    logging.getLogger("licensemark").setLevel(TRACE_LEVEL)
