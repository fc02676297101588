# licensemark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark CLI package.

This package groups the Click command definitions and the helpers they share.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        licensemark = "licensemark.cli.main:cli"

All subcommands live in `licensemark.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
