# licensemark:header:start
#
#   project      : LicenseMark
#   file         : pound.py
#   file_relpath : src/licensemark/formats/pound.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Line-comment headers using ``#``.

Scripts keep their shebang (and a PEP 263 encoding line) on top; the header
is looked for, and inserted, right after them.
"""

from __future__ import annotations

from typing import Final

from licensemark.formats.base import HeaderFormat
from licensemark.formats.mixins import LineCommentMixin, ShebangAwareMixin
from licensemark.formats.registry import register_format


class PoundHeaderFormat(ShebangAwareMixin, LineCommentMixin, HeaderFormat):
    """Header format for consecutive ``#`` comment lines."""

    name = "pound"
    description = "Hash comments (# ...), shebang aware"
    extensions = (
        ".bash",
        ".cfg",
        ".cmake",
        ".ini",
        ".mk",
        ".pl",
        ".properties",
        ".py",
        ".pyi",
        ".r",
        ".rb",
        ".sh",
        ".toml",
        ".zsh",
    )
    filenames = ("Dockerfile", "Makefile", "Containerfile")
    prefix = "#"


POUND: Final[PoundHeaderFormat] = register_format(PoundHeaderFormat())
