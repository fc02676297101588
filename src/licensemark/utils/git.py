# licensemark:header:start
#
#   project      : LicenseMark
#   file         : git.py
#   file_relpath : src/licensemark/utils/git.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Query commit years from git.

Every helper returns ``None`` when git is unavailable, the path is not
inside a work tree or the history has no answer; callers pick their own
fallback. Years are taken from author dates.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from licensemark.config.logging import LicenseMarkLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger: LicenseMarkLogger = get_logger(__name__)

_YEAR_FORMAT = ("--format=%ad", "--date=format:%Y")


def run_git(args: Sequence[str], cwd: Path) -> str | None:
    """Run ``git <args>`` in ``cwd`` and return its stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("git %s failed in %s: %s", " ".join(args), cwd, exc)
        return None
    return result.stdout


def _year(output: str | None, *, last: bool = False) -> int | None:
    if not output:
        return None
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        return None
    value = lines[-1] if last else lines[0]
    return int(value) if value.isdigit() else None


def is_dirty(cwd: Path, path: Path | None = None) -> bool:
    """Return True if the work tree (or just ``path``) has uncommitted changes."""
    args = ["status", "--porcelain"]
    if path is not None:
        args += ["--", str(path)]
    out = run_git(args, cwd)
    return bool(out and out.strip())


def first_commit_year(cwd: Path) -> int | None:
    """Return the year of the root commit of the repository."""
    roots = run_git(["rev-list", "--max-parents=0", "HEAD"], cwd)
    if not roots or not roots.split():
        return None
    return _year(run_git(["log", "-1", *_YEAR_FORMAT, roots.split()[-1]], cwd))


def last_commit_year(cwd: Path, path: Path | None = None) -> int | None:
    """Return the year of the latest commit (touching ``path`` when given)."""
    args = ["log", "-1", *_YEAR_FORMAT]
    if path is not None:
        args += ["--", str(path)]
    return _year(run_git(args, cwd))


def added_year(cwd: Path, path: Path) -> int | None:
    """Return the year of the commit that added ``path`` (following renames)."""
    out = run_git(["log", "--diff-filter=A", "--follow", *_YEAR_FORMAT, "--", str(path)], cwd)
    return _year(out, last=True)
