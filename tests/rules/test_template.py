# licensemark:header:start
#
#   project      : LicenseMark
#   file         : test_template.py
#   file_relpath : tests/rules/test_template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Tests for license template parsing, matching and rendering."""

from __future__ import annotations

import pytest

from licensemark.core.errors import HeaderTemplateError
from licensemark.engine.context import HeaderFileContext, YearSelectionMode
from licensemark.rules.template import HeaderTemplate, TextToken, VarToken, tokenize
from tests.conftest import APACHE_HEADER, make_template, parametrize

CTX = HeaderFileContext(file_name="Main.java", creation_year=2020, last_modified_year=2025)

OPTIONAL_TEMPLATE = """\
#type YEARS YEAR_LENIENT_RANGE
Copyright ${YEARS} Example Corp.
#optional
Contains code from Acme.
#end
All rights reserved.
"""


# --- tokenize -------------------------------------------------------------------------------------


@parametrize(
    "line, expected",
    [
        ("plain text", (TextToken("plain text"),)),
        ("a ${X} b", (TextToken("a "), VarToken("X"), TextToken(" b"))),
        ("${A}${B}", (VarToken("A"), VarToken("B"))),
        ("costs $5", (TextToken("costs $5"),)),
        ("${not closed", (TextToken("${not closed"),)),
        ("cost \\${X}", (TextToken("cost \\${X}"),)),
        ("\\\\${X}", (TextToken("\\\\"), VarToken("X"))),
        ("", ()),
    ],
)
def test_tokenize(line: str, expected: tuple[object, ...]) -> None:
    assert tokenize(line) == expected


# --- parsing --------------------------------------------------------------------------------------


def test_parse_trims_empty_lines_at_both_ends() -> None:
    template = HeaderTemplate.from_text("t", "\n\nFirst\n\nLast\n  \n\n")

    assert [line.source for line in template.lines] == ["First", "", "Last"]


def test_parse_declares_default_variables() -> None:
    template = make_template()

    assert {"CREATION_YEAR", "FILE_NAME"} <= set(template.variables)
    assert template.year_selection is YearSelectionMode.PROJECT


@parametrize("value", ["file", "FILE", "File"])
def test_parse_year_selection(value: str) -> None:
    template = HeaderTemplate.from_text("t", f"#year_selection {value}\nCopyright")

    assert template.year_selection is YearSelectionMode.FILE


def test_parse_optional_block_marks_lines() -> None:
    template = HeaderTemplate.from_text("t", OPTIONAL_TEMPLATE)

    assert [line.optional for line in template.lines] == [False, True, False]
    assert template.variables["YEARS"].name == "YEAR_LENIENT_RANGE"


@parametrize(
    "text, message",
    [
        ("#\nA", "lic.txt:1: No valid instructions could be found."),
        ("A\n#type YEARS", "lic.txt:2: Invalid type instruction. Expected variable name and type."),
        ("#type YEARS BOGUS", 'lic.txt:1: Invalid variable type "BOGUS" for variable "YEARS".'),
        (
            "#year_selection weekly",
            "lic.txt:1: Invalid year selection instruction. Expected 'project' or 'file'.",
        ),
        ("#frobnicate", 'lic.txt:1: Unknown instruction: "frobnicate".'),
        ("By ${AUTHOR} and ${OWNER}", "lic.txt: Undeclared variables found: AUTHOR, OWNER."),
    ],
)
def test_parse_errors(text: str, message: str) -> None:
    with pytest.raises(HeaderTemplateError) as excinfo:
        HeaderTemplate.from_text("lic.txt", text)

    assert str(excinfo.value) == message
    assert excinfo.value.source == "lic.txt"


def test_parse_error_carries_line_index() -> None:
    with pytest.raises(HeaderTemplateError) as excinfo:
        HeaderTemplate.from_text("lic.txt", "A\nB\n#type X")

    assert excinfo.value.line == 2


def test_template_equality_ignores_name() -> None:
    assert make_template(name="one") == make_template(name="two")
    assert make_template() != make_template("Something else")


# --- matching -------------------------------------------------------------------------------------


def test_match_collects_values() -> None:
    match = make_template().match(
        ["Copyright 2019 Example Corp.", "", "Licensed under the Apache License, Version 2.0."]
    )

    assert match.ok
    assert match.variables == {"CREATION_YEAR": 2019}
    assert match.describe() == ""


def test_match_reports_first_mismatch() -> None:
    match = make_template().match(
        ["Copyright 2019 Example Corp.", "", "Licensed under the MIT License."]
    )

    assert not match.ok
    assert match.error_line == 2
    assert match.describe() == (
        'header line 3: expected "Licensed under the Apache License, Version 2.0.", '
        'got "Licensed under the MIT License."'
    )
    # Values read before the failure are kept
    assert match.variables == {"CREATION_YEAR": 2019}


def test_match_is_whole_line() -> None:
    match = make_template().match(["Copyright 2019 Example Corp. and friends"])

    assert not match.ok
    assert match.error_line == 0


def test_match_treats_regex_characters_literally() -> None:
    template = HeaderTemplate.from_text("t", "Licensed (MIT) [v1.0]*")

    assert template.match(["Licensed (MIT) [v1.0]*"]).ok
    assert not template.match(["Licensed (MIT) [v1X0]*"]).ok
    assert not template.match(["Licensed MIT v1.0"]).ok


def test_match_extra_lines() -> None:
    match = make_template().match(
        [
            "Copyright 2019 Example Corp.",
            "",
            "Licensed under the Apache License, Version 2.0.",
            "Have a nice day.",
        ]
    )

    assert match.error == "unexpected extra header lines"
    assert match.error_line == 3


def test_match_shorter_header_fits() -> None:
    assert make_template().match(["Copyright 2019 Example Corp."]).ok


def test_match_diverging_values() -> None:
    template = HeaderTemplate.from_text(
        "t", "Copyright ${CREATION_YEAR} Example Corp.\nCreated in ${CREATION_YEAR}."
    )

    match = template.match(["Copyright 2019 Example Corp.", "Created in 2020."])

    assert match.error == 'diverging values for "CREATION_YEAR"'
    assert match.error_line == 1
    assert template.match(["Copyright 2019 Example Corp.", "Created in 2019."]).ok


def test_match_skips_missing_optional_line() -> None:
    template = HeaderTemplate.from_text("t", OPTIONAL_TEMPLATE)

    match = template.match(["Copyright 2019-2021 Example Corp.", "All rights reserved."])

    assert match.ok
    assert match.present_optional == frozenset()
    assert match.variables == {"YEARS": (2019, 2021)}


def test_match_records_present_optional_line() -> None:
    template = HeaderTemplate.from_text("t", OPTIONAL_TEMPLATE)

    match = template.match(
        ["Copyright 2019 Example Corp.", "Contains code from Acme.", "All rights reserved."]
    )

    assert match.ok
    assert match.present_optional == frozenset({1})


# --- rendering ------------------------------------------------------------------------------------


def test_render_without_header_uses_context() -> None:
    assert make_template().render(CTX) == (
        "Copyright 2020 Example Corp.",
        "",
        "Licensed under the Apache License, Version 2.0.",
    )


def test_render_keeps_existing_creation_year() -> None:
    template = make_template()
    match = template.match(["Copyright 2011 Example Corp."])

    assert template.render(CTX, match)[0] == "Copyright 2011 Example Corp."


def test_render_updates_file_name() -> None:
    template = HeaderTemplate.from_text("t", "File: ${FILE_NAME}")
    match = template.match(["File: Old.java"])

    assert match.ok
    assert template.render(CTX, match) == ("File: Main.java",)


def test_render_optional_lines_follow_the_existing_header() -> None:
    template = HeaderTemplate.from_text("t", OPTIONAL_TEMPLATE)

    without = template.match(["Copyright 2019 Example Corp.", "All rights reserved."])
    with_optional = template.match(
        ["Copyright 2019 Example Corp.", "Contains code from Acme.", "All rights reserved."]
    )

    assert template.render(CTX, without) == (
        "Copyright 2019-2025 Example Corp.",
        "All rights reserved.",
    )
    assert template.render(CTX, with_optional) == (
        "Copyright 2019-2025 Example Corp.",
        "Contains code from Acme.",
        "All rights reserved.",
    )
    # New headers leave optional lines out
    assert template.render(CTX) == ("Copyright 2020-2025 Example Corp.", "All rights reserved.")


def test_render_keeps_escaped_placeholder_text() -> None:
    template = HeaderTemplate.from_text("t", "Price: \\${CREATION_YEAR}")

    assert template.render(CTX) == ("Price: \\${CREATION_YEAR}",)
    assert template.match(["Price: \\${CREATION_YEAR}"]).ok


def test_apache_header_constant_is_three_lines() -> None:
    assert len(make_template(APACHE_HEADER).lines) == 3
