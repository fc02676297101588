# licensemark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark package.

LicenseMark inserts, verifies and updates license header comments across a
source tree. Each file is matched to a rule (comment syntax + license
template); the engine reads the file's leading comment block, decides whether
it is missing, up to date or stale, and rewrites it in place on demand.
"""

from __future__ import annotations
