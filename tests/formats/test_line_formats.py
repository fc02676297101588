# licensemark:header:start
#
#   project      : LicenseMark
#   file         : test_line_formats.py
#   file_relpath : tests/formats/test_line_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Reading and writing line-comment headers (``//`` and ``#``)."""

from __future__ import annotations

from licensemark.formats import POUND, SLASH
from tests.conftest import parametrize


def test_slash_reads_consecutive_comment_lines() -> None:
    text = "// Copyright 2024 Example\n//\n// MIT licensed.\n\nexport const x = 1;\n"
    result = SLASH.read_header_comment(text)

    assert result.existing == ("Copyright 2024 Example", "", "MIT licensed.")
    assert result.start == 0
    assert text[result.end :] == "\n\nexport const x = 1;\n"


def test_slash_absent_when_code_comes_first() -> None:
    result = SLASH.read_header_comment("const x = 1; // trailing\n// later comment\n")

    assert result.existing is None
    assert (result.start, result.end) == (0, 0)


def test_slash_write() -> None:
    written = SLASH.write_header_comment(["Copyright 2024", "", "MIT"], "\n")

    assert written == "// Copyright 2024\n//\n// MIT"


def test_slash_header_at_end_of_file_without_newline() -> None:
    text = "// Only a header"
    result = SLASH.read_header_comment(text)

    assert result.existing == ("Only a header",)
    assert result.end == len(text)


def test_slash_crlf_span_excludes_separator() -> None:
    text = "// One\r\n// Two\r\n\r\nlet x = 1;\r\n"
    result = SLASH.read_header_comment(text)

    assert result.separator == "\r\n"
    assert result.existing == ("One", "Two")
    assert text[result.start : result.end] == "// One\r\n// Two"


def test_pound_keeps_relative_indentation() -> None:
    text = "#  Indented\n# Flush\n\nx = 1\n"

    assert POUND.read_header_comment(text).existing == (" Indented", "Flush")


@parametrize(
    ("text", "offset"),
    [
        ("x = 1\n", 0),
        ("#!/usr/bin/env python\nx = 1\n", 22),
        ("# -*- coding: utf-8 -*-\nx = 1\n", 24),
        ("#!/usr/bin/env python\n# coding=latin-1\nx = 1\n", 39),
        ("# vim: set fileencoding=utf-8 :\nx = 1\n", 32),
        ("# Source coding: utf-8 required\nx = 1\n", 0),
        ("# coding: utf-8, see NOTICE\nx = 1\n", 0),
        ("#!/bin/sh", 9),
    ],
)
def test_pound_insertion_offset(text: str, offset: int) -> None:
    assert POUND.insertion_offset(text) == offset


def test_pound_header_after_shebang() -> None:
    text = "#!/usr/bin/env python\n# Copyright 2023 Example\n\nprint('hi')\n"
    result = POUND.read_header_comment(text)

    assert result.existing == ("Copyright 2023 Example",)
    assert result.start == len("#!/usr/bin/env python\n")


def test_pound_shebang_only_is_not_a_header() -> None:
    result = POUND.read_header_comment("#!/bin/sh\necho hi\n")

    assert result.existing is None


def test_pound_write() -> None:
    assert POUND.write_header_comment(["A", "", "B"], "\n") == "# A\n#\n# B"


def test_pound_header_line_mentioning_coding_round_trips() -> None:
    lines = ["Source coding: utf-8 required", "Copyright 2020"]
    text = POUND.write_header_comment(lines, "\n") + "\n\nbody\n"

    result = POUND.read_header_comment(text)

    assert result.existing == tuple(lines)
    assert result.start == 0


def test_line_formats_are_not_delimited() -> None:
    assert SLASH.read_header_comment("// A\n\nx\n").delimited is False
    assert POUND.read_header_comment("# A\n\nx\n").delimited is False
