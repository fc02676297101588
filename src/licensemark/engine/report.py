# licensemark:header:start
#
#   project      : LicenseMark
#   file         : report.py
#   file_relpath : src/licensemark/engine/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Per-file outcomes and the aggregated run report."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from yachalk import chalk

from licensemark.core.enum_mixins import EnumIntrospectionMixin
from licensemark.engine.decision import Decision
from licensemark.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from pathlib import Path


class RunMode(str, Enum):
    """Operating mode of a run."""

    CHECK = "check"
    APPLY = "apply"


class FileState(EnumIntrospectionMixin, ColoredStrEnum):
    """Terminal state of a file after a run."""

    SKIPPED = ("skipped", chalk.gray)
    REPORTED = ("reported", chalk.yellow)
    REWRITTEN = ("rewritten", chalk.green)
    UNCHANGED = ("left unchanged", chalk.green)
    FAILED = ("failed", chalk.red_bright)


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """What happened to one file.

    Attributes:
        path (Path): The file.
        state (FileState): Terminal state.
        decision (Decision | None): The header decision, when one was reached.
        rule (str | None): Name of the rule that applied.
        format (str | None): Name of the header format used.
        message (str | None): Short explanation (skip reason, I/O error, ...).
        errors (tuple[str, ...]): Details on why the header did not match.
    """

    path: Path
    state: FileState
    decision: Decision | None = None
    rule: str | None = None
    format: str | None = None
    message: str | None = None
    errors: tuple[str, ...] = ()

    @property
    def is_violation(self) -> bool:
        """Return True if the file needs attention after the run."""
        return self.state in (FileState.REPORTED, FileState.FAILED)

    @property
    def action(self) -> str:
        """Return the summary bucket of this outcome."""
        if self.state is FileState.FAILED:
            return "failed"
        if self.state is FileState.SKIPPED:
            return "skipped"
        if self.state is FileState.REWRITTEN:
            return "inserted" if self.decision is Decision.MISSING else "replaced"
        if self.state is FileState.UNCHANGED or self.decision is None:
            return "unchanged"
        return self.decision.name.lower()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "path": str(self.path),
            "state": self.state.name.lower(),
            "decision": self.decision.name.lower() if self.decision is not None else None,
            "rule": self.rule,
            "format": self.format,
            "message": self.message,
            "errors": list(self.errors),
        }


@dataclass(frozen=True, slots=True)
class RunReport:
    """Outcomes of a check or apply run, sorted by path.

    Attributes:
        mode (RunMode): How the run was executed.
        outcomes (tuple[FileOutcome, ...]): One outcome per processed file.
    """

    mode: RunMode
    outcomes: tuple[FileOutcome, ...]

    @property
    def violations(self) -> tuple[FileOutcome, ...]:
        """Files that are non-compliant (check) or could not be fixed (apply)."""
        return tuple(o for o in self.outcomes if o.is_violation)

    @property
    def failures(self) -> tuple[FileOutcome, ...]:
        """Files that failed with an I/O error or an unparseable header."""
        return tuple(o for o in self.outcomes if o.state is FileState.FAILED)

    @property
    def processed(self) -> int:
        """Number of files a decision was attempted for (skipped files excluded)."""
        return sum(1 for o in self.outcomes if o.state is not FileState.SKIPPED)

    @property
    def ok(self) -> bool:
        """Return True when the run leaves nothing to fix."""
        return not self.violations

    def counts(self) -> dict[str, int]:
        """Return the number of files per summary bucket.

        Apply runs count ``unchanged``, ``inserted``, ``replaced`` and ``failed``;
        check runs count ``unchanged``, ``missing``, ``stale``, ``unparseable``
        and ``failed``. Both count ``skipped``.
        """
        if self.mode is RunMode.APPLY:
            keys = ("unchanged", "inserted", "replaced", "failed", "skipped")
        else:
            keys = ("unchanged", "missing", "stale", "unparseable", "failed", "skipped")
        tally = Counter(o.action for o in self.outcomes)
        return {key: tally.get(key, 0) for key in keys}

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "mode": self.mode.value,
            "ok": self.ok,
            "counts": self.counts(),
            "files": [o.to_dict() for o in self.outcomes],
        }
