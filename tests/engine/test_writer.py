# licensemark:header:start
#
#   project      : LicenseMark
#   file         : test_writer.py
#   file_relpath : tests/engine/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Tests for header splicing and atomic writes."""

from __future__ import annotations

import os
import stat
import sys
from typing import TYPE_CHECKING

import pytest

from licensemark.engine.decision import Decision, Verdict
from licensemark.engine.writer import splice_header, write_atomic
from licensemark.formats import CBLOCK, POUND, SLASH
from licensemark.formats.base import HeaderFormat
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

HEADER = ("Copyright 2025 Example Corp.", "", "MIT")


def verdict_for(fmt: HeaderFormat, text: str, decision: Decision = Decision.MISSING) -> Verdict:
    return Verdict(decision=decision, read=fmt.read_header_comment(text), expected=HEADER)


def test_insert_into_plain_file() -> None:
    text = "package main;\n"

    out = splice_header(text, CBLOCK, verdict_for(CBLOCK, text))

    assert out == (
        "/*\n * Copyright 2025 Example Corp.\n *\n * MIT\n */\n\npackage main;\n"
    )


def test_insert_keeps_leading_whitespace_after_the_header() -> None:
    text = "\n\nconst a = 1;\n"

    out = splice_header(text, SLASH, verdict_for(SLASH, text))

    assert out == "// Copyright 2025 Example Corp.\n//\n// MIT\n\n\n\nconst a = 1;\n"


def test_insert_into_empty_file() -> None:
    assert splice_header("", POUND, verdict_for(POUND, "")) == (
        "# Copyright 2025 Example Corp.\n#\n# MIT\n"
    )


def test_insert_after_shebang() -> None:
    text = "#!/bin/sh\necho hi\n"

    out = splice_header(text, POUND, verdict_for(POUND, text))

    assert out == "#!/bin/sh\n# Copyright 2025 Example Corp.\n#\n# MIT\n\necho hi\n"


def test_insert_after_shebang_without_newline() -> None:
    text = "#!/bin/sh"

    out = splice_header(text, POUND, verdict_for(POUND, text))

    assert out == "#!/bin/sh\n# Copyright 2025 Example Corp.\n#\n# MIT\n"


def test_insert_uses_the_file_separator() -> None:
    text = "int x;\r\nint y;\r\n"

    out = splice_header(text, CBLOCK, verdict_for(CBLOCK, text))

    assert out.startswith("/*\r\n * Copyright 2025 Example Corp.\r\n")
    assert out.endswith(" */\r\n\r\nint x;\r\nint y;\r\n")


def test_insert_above_doc_comment() -> None:
    text = "/** Docs. */\nclass A {}\n"

    out = splice_header(text, CBLOCK, verdict_for(CBLOCK, text))

    assert out.endswith(" */\n\n/** Docs. */\nclass A {}\n")


def test_replace_touches_only_the_header_span() -> None:
    text = "\n/*\n * Copyright 2011 Old Corp.\n */\n\n\nclass A {}\n"

    out = splice_header(text, CBLOCK, verdict_for(CBLOCK, text, Decision.STALE))

    assert out == "\n/*\n * Copyright 2025 Example Corp.\n *\n * MIT\n */\n\n\nclass A {}\n"


def test_replace_line_header_after_shebang() -> None:
    text = "#!/usr/bin/env python\n# Old header\n\nimport os\n"

    out = splice_header(text, POUND, verdict_for(POUND, text, Decision.STALE))

    assert out == (
        "#!/usr/bin/env python\n# Copyright 2025 Example Corp.\n#\n# MIT\n\nimport os\n"
    )


@parametrize("decision", [Decision.MATCHES, Decision.UNPARSEABLE])
def test_splice_refuses_other_decisions(decision: Decision) -> None:
    verdict = verdict_for(CBLOCK, "x", decision)

    with pytest.raises(ValueError, match="Refusing to rewrite"):
        splice_header("x", CBLOCK, verdict)


def test_write_atomic_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "a.py"
    target.write_text("old\n", encoding="utf-8")

    written = write_atomic(target, "new\r\nline é\n")

    assert target.read_bytes() == "new\r\nline é\n".encode()
    assert written == len("new\r\nline é\n".encode())
    assert [p.name for p in tmp_path.iterdir()] == ["a.py"]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_write_atomic_keeps_permissions(tmp_path: Path) -> None:
    target = tmp_path / "run.sh"
    target.write_text("echo\n", encoding="utf-8")
    os.chmod(target, 0o750)

    write_atomic(target, "echo hi\n")

    assert stat.S_IMODE(target.stat().st_mode) == 0o750


def test_write_atomic_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_atomic(tmp_path / "missing.py", "x")
    assert list(tmp_path.iterdir()) == []
