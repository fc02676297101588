# licensemark:header:start
#
#   project      : LicenseMark
#   file         : mixins.py
#   file_relpath : src/licensemark/formats/mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Reusable read/write behavior for the header formats.

* `BlockCommentMixin`: headers delimited by an opening and a closing marker
  (``/* ... */``, ``<!-- ... -->``).
* `LineCommentMixin`: headers made of consecutive prefixed lines
  (``// ...``, ``# ...``).
* `ShebangAwareMixin`: insertion point after a ``#!`` line and a PEP 263
  encoding declaration.

Concrete formats combine one of the first two with `HeaderFormat` and set the
marker class attributes.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar, Final

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.formats.base import (
    HeaderReadResult,
    dedent_one_level,
    detect_separator,
    first_non_whitespace,
    split_lines,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: LicenseMarkLogger = get_logger(__name__)

# A whole line holding only an encoding declaration: the Emacs and Vim
# modelines, or a bare "# coding: x" / "# encoding=x".
_RE_ENCODING_LINE: Final[re.Pattern[str]] = re.compile(
    r"""
    [ \t\f]*\#[ \t]*
    (?:
        -\*-[^\n]*?coding[:=][ \t]*[-\w.]+[^\n]*?-\*-
      | vim?:[^\n]*?encoding=[-\w.]+[^\n]*?
      | (?:en)?coding[:=][ \t]*[-\w.]+
    )
    [ \t]*\r?$
    """,
    re.VERBOSE | re.MULTILINE,
)


def _next_line_start(text: str, pos: int) -> int:
    nl: int = text.find("\n", pos)
    return len(text) if nl < 0 else nl + 1


class BlockCommentMixin:
    """Header located in a single delimited comment at the top of the file.

    The comment counts as the header only when its opening marker is the first
    non-whitespace token of the buffer. Leading blank lines are fine; any other
    leading content means the file has no header, even if a comment follows
    later on.
    """

    #: Opening marker, e.g. ``"/*"``
    opening: ClassVar[str] = ""
    #: Closing marker as searched for, e.g. ``"*/"``
    closing: ClassVar[str] = ""
    #: Closing line as written, e.g. ``" */"``
    closing_line: ClassVar[str] = ""
    indent: ClassVar[str] = " "

    def is_excluded_opening(self, text: str, index: int) -> bool:
        """Return True if the comment opening at ``index`` can never be a header."""
        return False

    def strip_line_affix(self, line: str) -> str:
        """Remove the per-line decoration of an interior line (none by default)."""
        return line

    def render_line(self, line: str) -> str:
        """Render one interior line (without separator)."""
        return f"{self.indent}{line}"

    def read_header_comment(self, text: str) -> HeaderReadResult:
        separator: str = detect_separator(text)
        first: int = first_non_whitespace(text)
        if not text.startswith(self.opening, first) or self.is_excluded_opening(text, first):
            return HeaderReadResult.absent(separator)

        body_start: int = first + len(self.opening)
        closing_idx: int = text.find(self.closing, body_start)
        if closing_idx < 0:
            logger.debug(
                "'%s' at offset %d is never closed by '%s'", self.opening, first, self.closing
            )
            return HeaderReadResult.absent(separator, malformed=True)

        existing = self._interior_lines(text[body_start:closing_idx], separator)
        return HeaderReadResult(
            start=first,
            end=closing_idx + len(self.closing),
            existing=existing,
            separator=separator,
        )

    def _interior_lines(self, interior: str, separator: str) -> tuple[str, ...]:
        parts: list[str] = split_lines(interior, separator)
        if len(parts) == 1:
            # Single-line comment, e.g. "/* Smol */"
            only: str = self.strip_line_affix(parts[0]).strip()
            return (only,) if only else ()

        # Text sharing a line with a marker is kept; a bare marker line is dropped.
        head: str = parts[0].strip()
        tail: str = self.strip_line_affix(parts[-1]).strip()
        body = dedent_one_level([self.strip_line_affix(p) for p in parts[1:-1]], self.indent)
        return ((head,) if head else ()) + body + ((tail,) if tail else ())

    def write_header_comment(self, lines: Sequence[str], separator: str) -> str:
        out: list[str] = [self.opening, separator]
        for line in lines:
            out.append(self.render_line(line))
            out.append(separator)
        out.append(self.closing_line)
        return "".join(out)


class LineCommentMixin:
    """Header made of consecutive lines starting with a comment prefix.

    The header starts at the first non-whitespace character after the
    format's insertion offset and extends over every following line whose
    stripped text starts with the prefix. A blank line or any other content
    ends it. The header span excludes the separator of its last line.

    Such a block may just as well be a tool directive (``//go:build``,
    ``# pylint: disable=...``) or a doc comment, so results are flagged as
    not delimited and the decision engine only treats the block as a license
    header when its first line fits a template.
    """

    #: Comment introducer, e.g. ``"#"`` or ``"//"``
    prefix: ClassVar[str] = ""
    indent: ClassVar[str] = " "

    def insertion_offset(self, text: str) -> int:
        return 0

    def read_header_comment(self, text: str) -> HeaderReadResult:
        separator: str = detect_separator(text)
        first: int = first_non_whitespace(text, self.insertion_offset(text))
        if not text.startswith(self.prefix, first):
            return HeaderReadResult.absent(separator)

        lines: list[str] = []
        pos: int = first
        end: int = first
        while True:
            nl: int = text.find("\n", pos)
            line: str = text[pos : len(text) if nl < 0 else nl]
            if line.endswith("\r"):
                line = line[:-1]
            stripped: str = line.lstrip()
            if not stripped.startswith(self.prefix):
                break
            lines.append(stripped[len(self.prefix) :])
            end = pos + len(line)
            if nl < 0:
                break
            pos = nl + 1

        return HeaderReadResult(
            start=first,
            end=end,
            existing=dedent_one_level(lines, self.indent),
            separator=separator,
            delimited=False,
        )

    def write_header_comment(self, lines: Sequence[str], separator: str) -> str:
        return separator.join(
            f"{self.prefix}{self.indent}{line}" if line else self.prefix for line in lines
        )


class ShebangAwareMixin:
    """Insertion point that skips a shebang and an encoding declaration.

    The encoding declaration (PEP 263) is honored on the first line, or on the
    second line when the first one is a shebang. Only a line that holds nothing
    but the declaration counts, so a header line merely mentioning "coding:"
    is still read as part of the header.
    """

    def insertion_offset(self, text: str) -> int:
        offset: int = 0
        if text.startswith("#!"):
            offset = _next_line_start(text, 0)
        if offset < len(text) and _RE_ENCODING_LINE.match(text, offset):
            offset = _next_line_start(text, offset)
        return offset
