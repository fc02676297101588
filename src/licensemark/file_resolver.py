# licensemark:header:start
#
#   project      : LicenseMark
#   file         : file_resolver.py
#   file_relpath : src/licensemark/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Expand command-line inputs into the files to process.

Inputs may be files, directories (walked recursively) or glob patterns
(expanded relative to the current working directory). Exclusion is left to
the rule resolver so that a single place owns pattern matching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from licensemark.config.logging import LicenseMarkLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: LicenseMarkLogger = get_logger(__name__)


@dataclass(slots=True)
class ExpandedPaths:
    """Result of `expand_paths`.

    Attributes:
        files (list[Path]): Sorted, de-duplicated files.
        missing (list[str]): Inputs that matched nothing.
    """

    files: list[Path] = field(default_factory=lambda: [])
    missing: list[str] = field(default_factory=lambda: [])


def expand_path(p: Path) -> list[Path]:
    """Expand a single input into files.

    Args:
        p (Path): A file, a directory or a glob pattern.

    Returns:
        list[Path]: The files it denotes (empty if nothing exists).
    """
    # Glob patterns are expanded relative to CWD.
    if any(ch in str(p) for ch in "*?["):
        base: Path = Path(p.anchor) if p.is_absolute() else Path(".")
        pattern: str = str(p.relative_to(base)) if p.is_absolute() else str(p)
        return [q for q in base.glob(pattern) if q.is_file()]
    if p.is_dir():
        return [q for q in p.rglob("*") if q.is_file()]
    if p.is_file():
        return [p]
    return []


def expand_paths(inputs: Iterable[str | Path]) -> ExpandedPaths:
    """Expand every input and collect the resulting files.

    Args:
        inputs (Iterable[str | Path]): Positional paths and patterns.

    Returns:
        ExpandedPaths: Files in sorted order and inputs that matched nothing.
    """
    result = ExpandedPaths()
    seen: set[Path] = set()
    for raw in inputs:
        expanded: list[Path] = expand_path(Path(raw))
        if not expanded:
            logger.warning("No files found for '%s'", raw)
            result.missing.append(str(raw))
            continue
        for path in expanded:
            if path not in seen:
                seen.add(path)
                result.files.append(path)

    result.files.sort(key=lambda q: q.as_posix())
    logger.debug("Expanded inputs into %d file(s)", len(result.files))
    return result
