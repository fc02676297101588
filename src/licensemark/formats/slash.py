# licensemark:header:start
#
#   project      : LicenseMark
#   file         : slash.py
#   file_relpath : src/licensemark/formats/slash.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Line-comment headers using ``//``."""

from __future__ import annotations

from typing import Final

from licensemark.formats.base import HeaderFormat
from licensemark.formats.mixins import LineCommentMixin
from licensemark.formats.registry import register_format


class SlashHeaderFormat(LineCommentMixin, HeaderFormat):
    """Header format for consecutive ``//`` comment lines."""

    name = "slash"
    description = "Line comments (// ...)"
    extensions = (
        ".cjs",
        ".dart",
        ".go",
        ".js",
        ".jsx",
        ".mjs",
        ".proto",
        ".rs",
        ".swift",
        ".ts",
        ".tsx",
    )
    prefix = "//"


SLASH: Final[SlashHeaderFormat] = register_format(SlashHeaderFormat())
