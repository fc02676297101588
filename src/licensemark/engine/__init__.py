# licensemark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""The check/apply engine: decisions, reports, splicing and the driver."""

from __future__ import annotations

from licensemark.engine.context import GitContextFactory, HeaderFileContext, YearSelectionMode
from licensemark.engine.decision import Decision, Verdict, decide
from licensemark.engine.driver import LicenseDriver
from licensemark.engine.report import FileOutcome, FileState, RunMode, RunReport

__all__ = [
    "Decision",
    "FileOutcome",
    "FileState",
    "GitContextFactory",
    "HeaderFileContext",
    "LicenseDriver",
    "RunMode",
    "RunReport",
    "Verdict",
    "YearSelectionMode",
    "decide",
]
