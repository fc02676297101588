# licensemark:header:start
#
#   project      : LicenseMark
#   file         : cblock.py
#   file_relpath : src/licensemark/formats/cblock.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""C-style block comment headers (``/* ... */``).

Interior lines are decorated with a leading ``*``:

    /*
     * Copyright 2024 Example
     *
     * Licensed under the MIT license.
     */

A documentation comment (``/**``) is never taken for a license header; a
missing header is then inserted above it.
"""

from __future__ import annotations

from typing import Final

from licensemark.formats.base import HeaderFormat
from licensemark.formats.mixins import BlockCommentMixin
from licensemark.formats.registry import register_format


class CBlockHeaderFormat(BlockCommentMixin, HeaderFormat):
    """Header format for ``/* ... */`` block comments with `` * `` line prefixes."""

    name = "cblock"
    description = "C-style block comment (/* ... */)"
    extensions = (
        ".c",
        ".h",
        ".cc",
        ".cpp",
        ".hpp",
        ".cs",
        ".css",
        ".groovy",
        ".java",
        ".kt",
        ".kts",
        ".less",
        ".scala",
        ".scss",
    )
    opening = "/*"
    closing = "*/"
    closing_line = " */"

    def is_excluded_opening(self, text: str, index: int) -> bool:
        return text.startswith("/**", index)

    def strip_line_affix(self, line: str) -> str:
        stripped: str = line.lstrip()
        if stripped.startswith("*"):
            return stripped[1:]
        return line

    def render_line(self, line: str) -> str:
        return f" * {line}" if line else " *"


CBLOCK: Final[CBlockHeaderFormat] = register_format(CBlockHeaderFormat())
