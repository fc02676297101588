# licensemark:header:start
#
#   project      : LicenseMark
#   file         : context.py
#   file_relpath : src/licensemark/engine/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Per-file facts that dynamic header values are computed from."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Protocol

from yachalk import chalk

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.core.enum_mixins import EnumIntrospectionMixin
from licensemark.rendering.colored_enum import ColoredStrEnum
from licensemark.utils.git import added_year, first_commit_year, is_dirty, last_commit_year

if TYPE_CHECKING:
    from pathlib import Path

logger: LicenseMarkLogger = get_logger(__name__)


class YearSelectionMode(EnumIntrospectionMixin, ColoredStrEnum):
    """Where the creation and last-modification years of a file come from."""

    # Years of the repository as a whole
    PROJECT = ("project", chalk.cyan)
    # Years of the individual file's history
    FILE = ("file", chalk.magenta)


@dataclass(frozen=True, slots=True)
class HeaderFileContext:
    """Facts about one file used to render its up-to-date header.

    Attributes:
        file_name (str): Base name of the file (``FILE_NAME`` placeholder).
        creation_year (int): Year the file (or project) was created.
        last_modified_year (int): Year the file (or project) was last modified.
    """

    file_name: str
    creation_year: int
    last_modified_year: int


class ContextFactory(Protocol):
    """Builds the `HeaderFileContext` of a file for a year selection mode."""

    def __call__(self, path: Path, mode: YearSelectionMode) -> HeaderFileContext:
        """Return the context of ``path``.

        Args:
            path (Path): The file being processed.
            mode (YearSelectionMode): Year source requested by the file's template.

        Returns:
            HeaderFileContext: The file's context.
        """
        ...


def _filesystem_year(path: Path) -> int | None:
    try:
        st = path.stat()
    except OSError:
        return None
    timestamp: float = getattr(st, "st_birthtime", st.st_mtime)
    return datetime.fromtimestamp(timestamp).year


class GitContextFactory:
    """Build file contexts from git history.

    * ``PROJECT`` mode: the creation year is the configured project creation
      year, else the year of the root commit; the modification year is the
      year of the latest commit, or the current year while the work tree has
      uncommitted changes. Computed once per factory.
    * ``FILE`` mode: the creation year is the year of the commit that added
      the file, else its filesystem creation (or modification) year; the
      modification year is the current year if the file has uncommitted
      changes, else the year of its latest commit.

    Anything git cannot answer falls back to the current year.

    Args:
        root (Path): Directory git commands run in.
        project_creation_year (int | None): Overrides the root commit year.
        today (date | None): Reference date for "current year" (tests).
    """

    def __init__(
        self,
        root: Path,
        *,
        project_creation_year: int | None = None,
        today: date | None = None,
    ) -> None:
        self.root: Path = root
        self.project_creation_year: int | None = project_creation_year
        self.current_year: int = (today or date.today()).year
        self._lock = threading.Lock()
        self._project_years: tuple[int, int] | None = None

    def _project(self) -> tuple[int, int]:
        with self._lock:
            if self._project_years is None:
                creation: int = (
                    self.project_creation_year
                    or first_commit_year(self.root)
                    or self.current_year
                )
                if is_dirty(self.root):
                    modified: int = self.current_year
                else:
                    modified = last_commit_year(self.root) or self.current_year
                logger.debug("Project years: created %d, last modified %d", creation, modified)
                self._project_years = (creation, modified)
            return self._project_years

    def _file(self, path: Path) -> tuple[int, int]:
        # git runs in the root, not in the directory the path is relative to
        target: Path = path.resolve()
        creation: int = (
            added_year(self.root, target) or _filesystem_year(target) or self.current_year
        )
        if is_dirty(self.root, target):
            modified: int = self.current_year
        else:
            modified = last_commit_year(self.root, target) or self.current_year
        return creation, modified

    def __call__(self, path: Path, mode: YearSelectionMode) -> HeaderFileContext:
        if mode is YearSelectionMode.PROJECT:
            creation, modified = self._project()
        else:
            creation, modified = self._file(path)
        return HeaderFileContext(
            file_name=path.name,
            creation_year=creation,
            last_modified_year=modified,
        )
