# licensemark:header:start
#
#   project      : LicenseMark
#   file         : variables.py
#   file_relpath : src/licensemark/rules/variables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Placeholder variable types for license templates.

A template placeholder ``${NAME}`` is bound to a `VariableType`. The type
knows how to recognize the value in an existing header (``pattern``), how to
convert between text and value (``parse``/``render``) and how to bring an old
value up to date for a file (``up_to_date``).

Built-in types:

| type                 | example          | up-to-date rule                                 |
| -------------------- | ---------------- | ----------------------------------------------- |
| `CREATION_YEAR`      | ``2021``         | keep the old year, else the creation year      |
| `FILE_NAME`          | ``Main.java``    | always the current file name                   |
| `YEAR_LENIENT_RANGE` | ``2019-2024``    | extend the upper bound to the last-modified year |
| `YEAR_LIST`          | ``2019, 2021``   | append every year up to the last-modified year |
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

    from licensemark.engine.context import HeaderFileContext

CREATION_YEAR_VAR: Final[str] = "CREATION_YEAR"
FILE_NAME_VAR: Final[str] = "FILE_NAME"


class VariableType(ABC):
    """Behavior of one kind of template placeholder.

    Attributes:
        name (str): Type name as used in ``#type NAME TYPE`` directives.
        pattern (str): Regular expression (without capturing groups) matching
            a rendered value.
    """

    name: ClassVar[str]
    pattern: ClassVar[str]

    @abstractmethod
    def parse(self, text: str) -> object:
        """Convert matched header text into a value."""

    @abstractmethod
    def render(self, value: object) -> str:
        """Convert a value into header text."""

    @abstractmethod
    def up_to_date(self, context: HeaderFileContext, old: object | None) -> object:
        """Return the value the header should carry now.

        Args:
            context (HeaderFileContext): Facts about the file being processed.
            old (object | None): The value found in the existing header, if any.

        Returns:
            object: The up-to-date value.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CreationYearType(VariableType):
    """A single year that never changes once written."""

    name = CREATION_YEAR_VAR
    pattern = r"\d+"

    def parse(self, text: str) -> int:
        return int(text)

    def render(self, value: object) -> str:
        return str(value)

    def up_to_date(self, context: HeaderFileContext, old: object | None) -> object:
        return old if old is not None else context.creation_year


class FileNameType(VariableType):
    """The base name of the file; never contains spaces or tabs."""

    name = FILE_NAME_VAR
    pattern = r"[^ \t]+"

    def parse(self, text: str) -> str:
        return text

    def render(self, value: object) -> str:
        return str(value)

    def up_to_date(self, context: HeaderFileContext, old: object | None) -> object:
        return context.file_name


class YearLenientRangeType(VariableType):
    """A year or a ``start-end`` year range, as a ``tuple[int, ...]``."""

    name = "YEAR_LENIENT_RANGE"
    pattern = r"\d+(?:-\d+)?"

    def parse(self, text: str) -> tuple[int, ...]:
        return tuple(int(part) for part in text.split("-"))

    def render(self, value: object) -> str:
        return "-".join(str(year) for year in _years(value))

    def up_to_date(self, context: HeaderFileContext, old: object | None) -> object:
        modified: int = context.last_modified_year
        if old is None:
            if context.creation_year != modified:
                return (context.creation_year, modified)
            return (context.creation_year,)

        years = _years(old)
        if len(years) > 1:
            return (years[0], max(years[1], modified))
        if years[0] < modified:
            return (years[0], modified)
        return years


class YearListType(VariableType):
    """A comma-separated list of years, as a sorted ``tuple[int, ...]``."""

    name = "YEAR_LIST"
    pattern = r"\d+(?:, \d+)*"

    def parse(self, text: str) -> tuple[int, ...]:
        return tuple(sorted(int(part) for part in text.split(", ")))

    def render(self, value: object) -> str:
        return ", ".join(str(year) for year in _years(value))

    def up_to_date(self, context: HeaderFileContext, old: object | None) -> object:
        modified: int = context.last_modified_year
        if old is None:
            return tuple(range(context.creation_year, modified + 1))

        years = _years(old)
        last_known: int = years[-1]
        if last_known < modified:
            return tuple(sorted(set(years) | set(range(last_known + 1, modified + 1))))
        return years


def _years(value: object) -> tuple[int, ...]:
    if isinstance(value, tuple):
        return tuple(int(v) for v in value)
    if isinstance(value, int):
        return (value,)
    raise TypeError(f"Expected a year or a tuple of years, got {value!r}")


VARIABLE_TYPES: Final[Mapping[str, VariableType]] = MappingProxyType(
    {
        t.name: t
        for t in (CreationYearType(), FileNameType(), YearLenientRangeType(), YearListType())
    }
)

# Variables available in every template without a #type directive
DEFAULT_VARIABLES: Final[Mapping[str, VariableType]] = MappingProxyType(
    {
        CREATION_YEAR_VAR: VARIABLE_TYPES[CREATION_YEAR_VAR],
        FILE_NAME_VAR: VARIABLE_TYPES[FILE_NAME_VAR],
    }
)
