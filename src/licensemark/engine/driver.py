# licensemark:header:start
#
#   project      : LicenseMark
#   file         : driver.py
#   file_relpath : src/licensemark/engine/driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Check/apply driver.

The driver resolves every input path first (so that a rule ambiguity stops the
run before any file is read), then processes resolved files on a thread pool.
Each file goes through read -> decide -> report or rewrite on its own worker;
outcomes are collected by the calling thread as futures complete.

Per-file state machine::

    Unresolved -> Skipped                      (no rule / no format)
    Unresolved -> Resolved -> Decision -> Reported        (check mode)
                                       -> Rewritten       (apply, missing/stale)
                                       -> Left unchanged  (matches)
                                       -> Failed          (I/O error, apply on unparseable)
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.constants import UTF8_BOM
from licensemark.engine.decision import Decision, decide
from licensemark.engine.report import FileOutcome, FileState, RunMode, RunReport
from licensemark.engine.writer import splice_header, write_atomic

if TYPE_CHECKING:
    from collections.abc import Iterable
    from concurrent.futures import Future
    from pathlib import Path

    from licensemark.engine.context import ContextFactory, HeaderFileContext, YearSelectionMode
    from licensemark.engine.decision import Verdict
    from licensemark.rules.resolver import Resolution, RuleResolver

logger: LicenseMarkLogger = get_logger(__name__)


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 with line separators left untouched."""
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


class LicenseDriver:
    """Run check or apply over a set of files.

    Args:
        resolver (RuleResolver): Maps files to rules.
        context_factory (ContextFactory): Builds the per-file year context.
        workers (int | None): Thread pool size; None uses the executor default.
    """

    def __init__(
        self,
        resolver: RuleResolver,
        context_factory: ContextFactory,
        *,
        workers: int | None = None,
    ) -> None:
        self.resolver: RuleResolver = resolver
        self.context_factory: ContextFactory = context_factory
        self.workers: int | None = workers

    def check(self, paths: Iterable[Path]) -> RunReport:
        """Report files whose header is missing, stale or unparseable."""
        return self.run(paths, RunMode.CHECK)

    def apply(self, paths: Iterable[Path]) -> RunReport:
        """Insert missing headers and replace stale ones in place."""
        return self.run(paths, RunMode.APPLY)

    def run(self, paths: Iterable[Path], mode: RunMode) -> RunReport:
        """Process ``paths`` in ``mode``.

        Raises:
            RuleAmbiguityError: Before any file is read, if a file matches
                more than one rule.
        """
        batch = self.resolver.resolve_all(paths)
        outcomes: list[FileOutcome] = [
            FileOutcome(path=path, state=FileState.SKIPPED, message=reason)
            for path, reason in batch.skipped
        ]
        logger.info(
            "%s: %d file(s) resolved, %d skipped",
            mode.value,
            len(batch.resolved),
            len(batch.skipped),
        )

        if batch.resolved:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                futures: list[Future[FileOutcome]] = [
                    pool.submit(self.process, resolution, mode) for resolution in batch.resolved
                ]
                for future in as_completed(futures):
                    outcomes.append(future.result())

        outcomes.sort(key=lambda o: str(o.path))
        report = RunReport(mode=mode, outcomes=tuple(outcomes))
        logger.info("%s finished: %s", mode.value, report.counts())
        return report

    def process(self, resolution: Resolution, mode: RunMode) -> FileOutcome:
        """Read, decide and (in apply mode) rewrite a single file.

        I/O and decoding errors are captured in the returned outcome.
        """
        path: Path = resolution.path
        rule_name: str = resolution.rule.name
        fmt = resolution.format

        try:
            raw: str = read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read %s: %s", path, exc)
            return FileOutcome(
                path=path,
                state=FileState.FAILED,
                rule=rule_name,
                format=fmt.name,
                message=f"read error: {exc}",
            )

        has_bom: bool = raw.startswith(UTF8_BOM)
        text: str = raw[len(UTF8_BOM) :] if has_bom else raw

        read = fmt.read_header_comment(text)
        logger.trace(
            "%s: rule '%s', format '%s', header %s [%d:%d], separator %r",
            path,
            rule_name,
            fmt.name,
            "found" if read.present else ("malformed" if read.malformed else "absent"),
            read.start,
            read.end,
            read.separator,
        )

        contexts: dict[YearSelectionMode, HeaderFileContext] = {}

        def context_for(year_mode: YearSelectionMode) -> HeaderFileContext:
            if year_mode not in contexts:
                contexts[year_mode] = self.context_factory(path, year_mode)
            return contexts[year_mode]

        verdict: Verdict = decide(read, resolution.rule.templates, context_for)
        logger.trace("%s: %s %s", path, verdict.decision.value, "; ".join(verdict.errors))

        def outcome(state: FileState, message: str | None = None) -> FileOutcome:
            return FileOutcome(
                path=path,
                state=state,
                decision=verdict.decision,
                rule=rule_name,
                format=fmt.name,
                message=message,
                errors=verdict.errors,
            )

        if verdict.decision is Decision.MATCHES:
            return outcome(FileState.UNCHANGED)
        if mode is RunMode.CHECK:
            return outcome(FileState.REPORTED)
        if verdict.decision is Decision.UNPARSEABLE:
            logger.error("%s: header comment is not closed; fix it manually", path)
            return outcome(FileState.FAILED, "unparseable header, not rewritten")

        new_text: str = splice_header(text, fmt, verdict)
        try:
            write_atomic(path, UTF8_BOM + new_text if has_bom else new_text)
        except OSError as exc:
            logger.error("Cannot write %s: %s", path, exc)
            return outcome(FileState.FAILED, f"write error: {exc}")

        action = "inserted" if verdict.decision is Decision.MISSING else "replaced"
        logger.info("%s: header %s", path, action)
        return outcome(FileState.REWRITTEN)
