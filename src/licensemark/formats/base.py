# licensemark:header:start
#
#   project      : LicenseMark
#   file         : base.py
#   file_relpath : src/licensemark/formats/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Header format contract and the header read model.

A *header format* knows one comment syntax. It can locate the license header
at the top of a text buffer, extract its interior lines and emit a header for
a list of lines. Formats are stateless: each variant has exactly one shared
instance (see `licensemark.formats`).

Offsets are character offsets into the decoded text. Callers must hand in the
text with its native line separators intact; a format detects the separator
itself and never normalizes the rest of the buffer.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from licensemark.constants import DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Sequence

_RE_NON_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\S")


@dataclass(frozen=True, slots=True)
class HeaderReadResult:
    """Outcome of reading the header comment of a text buffer.

    Attributes:
        start (int): Offset of the first character of the header comment.
        end (int): Offset just past the last character of the header comment.
        existing (tuple[str, ...] | None): Interior lines of the header with
            separators stripped and one level of indentation removed, or
            ``None`` when no header is present. ``None`` is the authoritative
            "absent" signal; ``start == end == 0`` is only a sentinel.
        separator (str): Line separator detected in the buffer.
        malformed (bool): True when a comment opened at the header position but
            was never closed. Only block formats can tell this apart from
            "absent".
        delimited (bool): True when the header is a single delimited comment;
            False for a run of line comments, which may also be a leading
            directive or doc comment rather than a license header.
    """

    start: int
    end: int
    existing: tuple[str, ...] | None
    separator: str
    malformed: bool = False
    delimited: bool = True

    @classmethod
    def absent(cls, separator: str, *, malformed: bool = False) -> HeaderReadResult:
        """Return the result for a buffer without a usable header."""
        return cls(start=0, end=0, existing=None, separator=separator, malformed=malformed)

    @property
    def present(self) -> bool:
        """Return True if a header was found."""
        return self.existing is not None


def detect_separator(text: str) -> str:
    """Return the line separator of ``text`` based on its first line break.

    ``"\\r\\n"`` when the first ``"\\n"`` is preceded by ``"\\r"``, ``"\\n"``
    otherwise. Text without any line break yields `DEFAULT_SEPARATOR`.
    """
    idx: int = text.find("\n")
    if idx < 0:
        return DEFAULT_SEPARATOR
    if idx > 0 and text[idx - 1] == "\r":
        return "\r\n"
    return "\n"


def first_non_whitespace(text: str, start: int = 0) -> int:
    """Return the offset of the first non-whitespace character at or after ``start``.

    Returns ``len(text)`` when only whitespace follows.
    """
    match = _RE_NON_WHITESPACE.search(text, start)
    return match.start() if match else len(text)


def split_lines(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping a stray trailing ``"\\r"`` per line."""
    return [part[:-1] if part.endswith("\r") else part for part in text.split(separator)]


def dedent_one_level(lines: Sequence[str], unit: str) -> tuple[str, ...]:
    """Remove one level of indentation from ``lines``.

    When every non-blank line starts with ``unit``, exactly one ``unit`` is
    removed from each line that starts with it. Otherwise the leading
    whitespace common to all non-blank lines is removed. Whitespace-only lines
    collapse to ``""``.

    Args:
        lines (Sequence[str]): Interior header lines, separators already stripped.
        unit (str): The format's indentation unit (a space or a tab).

    Returns:
        tuple[str, ...]: The de-indented lines.
    """
    content: list[str] = [line for line in lines if line.strip()]
    if all(line.startswith(unit) for line in content):
        prefix: str = unit
    else:
        indents: list[str] = [line[: len(line) - len(line.lstrip())] for line in content]
        prefix = indents[0]
        for indent in indents[1:]:
            while not indent.startswith(prefix):
                prefix = prefix[:-1]

    out: list[str] = []
    for line in lines:
        if not line.strip():
            out.append("")
        elif prefix and line.startswith(prefix):
            out.append(line[len(prefix) :])
        else:
            out.append(line)
    return tuple(out)


class HeaderFormat(ABC):
    """Read/write strategy for one comment syntax.

    Subclasses must satisfy the round-trip contract: for any ``lines`` without
    embedded separators or literal comment markers,
    ``read_header_comment(write_header_comment(lines, sep) + sep + sep + body)``
    yields ``existing == tuple(lines)``.

    Attributes:
        name (str): Registry key (e.g. ``"cblock"``).
        description (str): One-line description shown by ``licensemark formats``.
        extensions (tuple[str, ...]): File suffixes that default to this format.
        filenames (tuple[str, ...]): Exact file names that default to this format.
        indent (str): The indentation unit of interior lines.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    extensions: ClassVar[tuple[str, ...]] = ()
    filenames: ClassVar[tuple[str, ...]] = ()
    indent: ClassVar[str] = " "

    @abstractmethod
    def read_header_comment(self, text: str) -> HeaderReadResult:
        """Locate and parse the header comment of ``text``.

        Never raises for arbitrary input: an absent or malformed header is a
        regular result.

        Args:
            text (str): The full file content, separators untouched.

        Returns:
            HeaderReadResult: Where the header is and what it contains.
        """

    @abstractmethod
    def write_header_comment(self, lines: Sequence[str], separator: str) -> str:
        """Render ``lines`` as a header comment.

        The result carries no trailing separator after the closing marker;
        the caller decides what follows.

        Args:
            lines (Sequence[str]): Header lines, without separators.
            separator (str): Line separator to use between lines.

        Returns:
            str: The header comment text.
        """

    def insertion_offset(self, text: str) -> int:
        """Return the offset where a missing header should be inserted."""
        return 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
