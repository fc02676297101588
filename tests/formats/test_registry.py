# licensemark:header:start
#
#   project      : LicenseMark
#   file         : test_registry.py
#   file_relpath : tests/formats/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Format registry lookups."""

from __future__ import annotations

from pathlib import Path

import pytest

from licensemark.formats import (
    CBLOCK,
    POUND,
    SLASH,
    XML,
    CBlockHeaderFormat,
    format_for_path,
    get_format,
    registered_formats,
)
from licensemark.formats.registry import register_format
from licensemark.formats.slash import SlashHeaderFormat
from tests.conftest import parametrize


def test_builtin_formats_are_registered() -> None:
    assert set(registered_formats()) >= {"cblock", "xml", "slash", "pound"}
    assert get_format("cblock") is CBLOCK
    assert get_format("nope") is None


@parametrize(
    ("name", "expected"),
    [
        ("Main.java", CBLOCK),
        ("style.CSS", CBLOCK),
        ("index.html", XML),
        ("main.go", SLASH),
        ("tool.py", POUND),
        ("Dockerfile", POUND),
        ("README", None),
        ("notes.unknown", None),
    ],
)
def test_format_for_path(name: str, expected: object) -> None:
    assert format_for_path(Path("src") / name) is expected


def test_register_same_instance_is_noop() -> None:
    assert register_format(CBLOCK) is CBLOCK


def test_register_conflicting_name_fails() -> None:
    class Impostor(SlashHeaderFormat):
        name = "cblock"

    with pytest.raises(ValueError, match="already registered"):
        register_format(Impostor())


def test_registered_view_is_read_only() -> None:
    view = registered_formats()
    with pytest.raises(TypeError):
        view["x"] = CBlockHeaderFormat()  # type: ignore[index]
