# licensemark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Configuration for LicenseMark.

The runtime configuration is the immutable `Config`, produced by
`MutableConfig.freeze`. TOML loading lives in `licensemark.config.loader`
(imported explicitly, since it depends on the formats and rules packages).
"""

from __future__ import annotations

from licensemark.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
