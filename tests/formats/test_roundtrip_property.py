# licensemark:header:start
#
#   project      : LicenseMark
#   file         : test_roundtrip_property.py
#   file_relpath : tests/formats/test_roundtrip_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Property tests for the header formats.

1) Writing lines and reading them back yields the same lines.
2) Splicing a header into a file never alters the text after the header.
3) Text without any comment marker never has a header.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from licensemark.engine.decision import Decision, Verdict
from licensemark.engine.writer import splice_header
from licensemark.formats import CBLOCK, POUND, SLASH, XML
from licensemark.formats.base import HeaderFormat, HeaderReadResult
from tests.conftest import mark_hypothesis

FORMATS: list[HeaderFormat] = [CBLOCK, XML, SLASH, POUND]

# No comment markers, separators or whitespace-only lines
s_line = st.one_of(
    st.just(""),
    st.from_regex(r"[A-Za-z0-9][A-Za-z0-9 .,()_]{0,30}", fullmatch=True),
)
s_lines = st.lists(s_line, min_size=1, max_size=8).filter(lambda ls: any(ls))
s_separator = st.sampled_from(["\n", "\r\n"])
s_format = st.sampled_from(FORMATS)
s_body = st.text(alphabet="abcdefxyz =();{}\n\t", max_size=80).filter(
    lambda b: not b or not b[0].isspace()
)


@mark_hypothesis
@settings(deadline=None, max_examples=30)
@given(fmt=s_format, lines=s_lines, sep=s_separator, body=s_body)
def test_write_then_read_roundtrip(
    fmt: HeaderFormat, lines: list[str], sep: str, body: str
) -> None:
    text = fmt.write_header_comment(lines, sep) + sep + sep + body
    result: HeaderReadResult = fmt.read_header_comment(text)

    assert result.existing == tuple(lines)
    assert result.start == 0
    assert result.separator == sep
    assert text[result.end :] == sep + sep + body


@mark_hypothesis
@settings(deadline=None, max_examples=30)
@given(fmt=s_format, old=s_lines, new=s_lines, sep=s_separator, body=s_body)
def test_replacing_a_header_keeps_the_rest(
    fmt: HeaderFormat, old: list[str], new: list[str], sep: str, body: str
) -> None:
    rest = sep + sep + body
    text = fmt.write_header_comment(old, sep) + rest
    read = fmt.read_header_comment(text)
    verdict = Verdict(decision=Decision.STALE, read=read, expected=tuple(new))

    out = splice_header(text, fmt, verdict)

    assert out.endswith(rest)
    assert out[: len(out) - len(rest)] == fmt.write_header_comment(new, sep)
    assert fmt.read_header_comment(out).existing == tuple(new)


@mark_hypothesis
@settings(deadline=None, max_examples=30)
@given(fmt=s_format, lines=s_lines, body=s_body.filter(bool))
def test_inserting_a_header_keeps_the_body(fmt: HeaderFormat, lines: list[str], body: str) -> None:
    read = fmt.read_header_comment(body)
    verdict = Verdict(decision=Decision.MISSING, read=read, expected=tuple(lines))

    out = splice_header(body, fmt, verdict)

    assert out.endswith(body)
    assert fmt.read_header_comment(out).existing == tuple(lines)


@mark_hypothesis
@settings(deadline=None, max_examples=50)
@given(fmt=s_format, text=st.text(alphabet="abc xyz=;.\n\r\t"))
def test_text_without_markers_has_no_header(fmt: HeaderFormat, text: str) -> None:
    result = fmt.read_header_comment(text)

    assert result.existing is None
    assert (result.start, result.end) == (0, 0)
