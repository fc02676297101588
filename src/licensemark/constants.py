# licensemark:header:start
#
#   project      : LicenseMark
#   file         : constants.py
#   file_relpath : src/licensemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

LICENSEMARK_VERSION: str = get_version("licensemark")

# Line separator used when a file contains no line break at all.
DEFAULT_SEPARATOR: Final[str] = "\n"

UTF8_BOM: Final[str] = "\ufeff"

CONFIG_FILE_NAME: Final[str] = "licensemark.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "licensemark"

ENV_LOG_LEVEL: Final[str] = "LICENSEMARK_LOG_LEVEL"
ENV_DEBUG: Final[str] = "LICENSEMARK_DEBUG"

# Paths that never carry a license header, applied on top of configured excludes.
DEFAULT_EXCLUDES: Final[tuple[str, ...]] = (
    ".git/",
    "*.txt",
    "*.json",
    "*.yml",
    "*.yaml",
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.ico",
    "*.webp",
    "*.bin",
    "*.class",
    "*.jar",
    "*.zip",
    "*.gz",
    "*.pyc",
    "MANIFEST.MF",
    "META-INF/services/",
)
