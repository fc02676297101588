# licensemark:header:start
#
#   project      : LicenseMark
#   file         : writer.py
#   file_relpath : src/licensemark/engine/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Splice a header into file text and write files atomically.

Splicing never touches text outside the header span: a replaced header keeps
every byte before ``start`` and after ``end``; an inserted header goes at the
format's insertion offset, separated from the rest of the file by one blank
line. Leading whitespace of the file is preserved (it ends up after the new
header).
"""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from typing import TYPE_CHECKING

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.engine.decision import Decision

if TYPE_CHECKING:
    from pathlib import Path

    from licensemark.engine.decision import Verdict
    from licensemark.formats.base import HeaderFormat

logger: LicenseMarkLogger = get_logger(__name__)


def splice_header(text: str, fmt: HeaderFormat, verdict: Verdict) -> str:
    """Return ``text`` with the header of ``verdict`` inserted or replaced.

    Args:
        text (str): The file content (BOM already removed).
        fmt (HeaderFormat): The file's header format.
        verdict (Verdict): A `Decision.MISSING` or `Decision.STALE` verdict.

    Returns:
        str: The new file content.

    Raises:
        ValueError: For verdicts that must not be rewritten.
    """
    if verdict.expected is None or verdict.decision not in (Decision.MISSING, Decision.STALE):
        raise ValueError(f"Refusing to rewrite a header that is {verdict.decision.value}")

    read = verdict.read
    separator: str = read.separator
    header: str = fmt.write_header_comment(verdict.expected, separator)

    if verdict.decision is Decision.STALE:
        return text[: read.start] + header + text[read.end :]

    offset: int = fmt.insertion_offset(text)
    before, after = text[:offset], text[offset:]
    if before and not before.endswith("\n"):
        before += separator
    if not after:
        return before + header + separator
    return before + header + separator + separator + after


def write_atomic(path: Path, text: str) -> int:
    """Replace the content of ``path`` with ``text`` in a single rename.

    The new content goes to a temporary file in the same directory, which
    then takes over the original's permission bits and replaces it. Text is
    written as UTF-8 without newline translation.

    Args:
        path (Path): The file to replace.
        text (str): The complete new content.

    Returns:
        int: Number of bytes written.

    Raises:
        OSError: If the file cannot be written; the original is left untouched.
    """
    mode: int = stat.S_IMODE(path.stat().st_mode)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".licensemark", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise
    bytes_written: int = len(text.encode("utf-8"))
    logger.debug("Wrote %d bytes to %s", bytes_written, path)
    return bytes_written
