# licensemark:header:start
#
#   project      : LicenseMark
#   file         : template.py
#   file_relpath : src/licensemark/rules/template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""License header templates.

A template is the expected license text, one entry per header line, with
optional placeholders and directives:

* ``${NAME}`` is a placeholder, bound to a `VariableType`. ``\\${NAME}`` is
  kept as literal text.
* ``#optional`` ... ``#end`` mark lines that may be missing from a header.
* ``#type NAME TYPE`` declares the type of placeholder ``NAME``.
* ``#year_selection project|file`` selects where years come from.

Leading and trailing empty lines are ignored. ``CREATION_YEAR`` and
``FILE_NAME`` are always declared.

Matching an existing header yields a `TemplateMatch` (the values found and
which optional lines were present); rendering turns a match back into the
up-to-date header lines for a given `HeaderFileContext`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.core.enum_mixins import enum_from_name
from licensemark.core.errors import HeaderTemplateError
from licensemark.engine.context import YearSelectionMode
from licensemark.rules.variables import DEFAULT_VARIABLES, VARIABLE_TYPES

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from licensemark.engine.context import HeaderFileContext
    from licensemark.rules.variables import VariableType

logger: LicenseMarkLogger = get_logger(__name__)

_RE_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Za-z0-9_]+)\}")


@dataclass(frozen=True, slots=True)
class TextToken:
    """Literal text of a template line."""

    text: str


@dataclass(frozen=True, slots=True)
class VarToken:
    """A ``${NAME}`` placeholder."""

    name: str


Token = TextToken | VarToken


@dataclass(frozen=True, slots=True)
class TemplateLine:
    """One line of a template.

    Attributes:
        tokens (tuple[Token, ...]): Literal text and placeholders, in order.
        optional (bool): Whether the line may be absent from a header.
    """

    tokens: tuple[Token, ...]
    optional: bool = False

    @property
    def is_empty(self) -> bool:
        """Return True for a line without placeholders and only whitespace."""
        if not self.tokens:
            return True
        only = self.tokens[0]
        return len(self.tokens) == 1 and isinstance(only, TextToken) and not only.text.strip()

    @property
    def source(self) -> str:
        """Return the line as written in the template."""
        return "".join(
            tok.text if isinstance(tok, TextToken) else f"${{{tok.name}}}" for tok in self.tokens
        )


@dataclass(frozen=True, slots=True)
class TemplateMatch:
    """Result of matching existing header lines against a template.

    Attributes:
        variables (Mapping[str, object]): Placeholder values found in the header.
        present_optional (frozenset[int]): Indices of optional template lines
            that were present.
        error (str | None): Why the header does not fit the template, or None.
        error_line (int | None): Index of the header line that failed.
    """

    variables: Mapping[str, object] = field(default_factory=dict)
    present_optional: frozenset[int] = frozenset()
    error: str | None = None
    error_line: int | None = None

    @property
    def ok(self) -> bool:
        """Return True when the header fits the template."""
        return self.error is None

    def describe(self) -> str:
        """Return a one-line description of the failure (empty when ``ok``)."""
        if self.error is None:
            return ""
        if self.error_line is None:
            return self.error
        return f"header line {self.error_line + 1}: {self.error}"


def tokenize(line: str) -> tuple[Token, ...]:
    """Split a template line into literal text and placeholders.

    A backslash right before ``$`` disables the placeholder; the backslash is
    kept as part of the literal text.
    """
    tokens: list[Token] = []
    last: int = 0
    backslash: bool = False
    i: int = 0
    while i < len(line):
        c: str = line[i]
        if c == "$" and not backslash:
            match = _RE_PLACEHOLDER.match(line, i)
            if match:
                if last != i:
                    tokens.append(TextToken(line[last:i]))
                tokens.append(VarToken(match.group(1)))
                i = last = match.end()
                continue
        backslash = c == "\\" and not backslash
        i += 1
    if last < len(line):
        tokens.append(TextToken(line[last:]))
    return tuple(tokens)


def _trim_empty(items: list[str]) -> tuple[str, ...]:
    start, end = 0, len(items)
    while start < end and not items[start]:
        start += 1
    while end > start and not items[end - 1]:
        end -= 1
    return tuple(items[start:end])


@dataclass(frozen=True)
class HeaderTemplate:
    """Parsed license template.

    Build instances with `HeaderTemplate.parse` (lines) or
    `HeaderTemplate.from_text`. Equality compares the template lines only.

    Attributes:
        name (str): Template name (rule name or license file), used in messages.
        lines (tuple[TemplateLine, ...]): Template lines, empty lines trimmed at both ends.
        variables (Mapping[str, VariableType]): Declared placeholder types.
        year_selection (YearSelectionMode): Source of the context years.
    """

    name: str = field(compare=False)
    lines: tuple[TemplateLine, ...]
    variables: Mapping[str, VariableType] = field(compare=False, repr=False)
    year_selection: YearSelectionMode = YearSelectionMode.PROJECT
    _patterns: tuple[re.Pattern[str], ...] = field(
        init=False, repr=False, compare=False, default=()
    )

    def __post_init__(self) -> None:
        patterns: list[re.Pattern[str]] = []
        for line in self.lines:
            parts: list[str] = []
            for idx, tok in enumerate(line.tokens):
                if isinstance(tok, TextToken):
                    parts.append(re.escape(tok.text))
                else:
                    parts.append(f"(?P<v{idx}>{self.variables[tok.name].pattern})")
            patterns.append(re.compile("".join(parts)))
        object.__setattr__(self, "_patterns", tuple(patterns))

    # --------------------------------------------------------------- parsing

    @classmethod
    def from_text(cls, name: str, text: str) -> HeaderTemplate:
        """Parse a template from a block of text (any line separator)."""
        return cls.parse(name, text.splitlines())

    @classmethod
    def parse(cls, name: str, raw: Sequence[str]) -> HeaderTemplate:
        """Parse template lines and directives.

        Args:
            name (str): Template name for error messages.
            raw (Sequence[str]): The template lines, separators stripped.

        Returns:
            HeaderTemplate: The parsed template.

        Raises:
            HeaderTemplateError: On unknown or malformed directives, unknown
                variable types and undeclared placeholders.
        """
        lines: list[TemplateLine] = []
        variables: dict[str, VariableType] = {}
        year_selection: YearSelectionMode = YearSelectionMode.PROJECT
        optional: bool = False

        for i, raw_line in enumerate(raw):
            if not raw_line.startswith("#"):
                lines.append(TemplateLine(tokens=tokenize(raw_line), optional=optional))
                continue

            instruction: list[str] = raw_line[1:].split()
            if not instruction:
                raise HeaderTemplateError(
                    "No valid instructions could be found.", line=i, source=name
                )
            keyword, args = instruction[0], instruction[1:]
            if keyword == "optional":
                optional = True
            elif keyword == "end":
                optional = False
            elif keyword == "type":
                if len(args) != 2:
                    raise HeaderTemplateError(
                        "Invalid type instruction. Expected variable name and type.",
                        line=i,
                        source=name,
                    )
                var_type: VariableType | None = VARIABLE_TYPES.get(args[1])
                if var_type is None:
                    raise HeaderTemplateError(
                        f'Invalid variable type "{args[1]}" for variable "{args[0]}".',
                        line=i,
                        source=name,
                    )
                variables[args[0]] = var_type
            elif keyword == "year_selection":
                mode: YearSelectionMode | None = (
                    enum_from_name(YearSelectionMode, args[0], case_insensitive=True)
                    if len(args) == 1
                    else None
                )
                if mode is None:
                    raise HeaderTemplateError(
                        "Invalid year selection instruction. Expected 'project' or 'file'.",
                        line=i,
                        source=name,
                    )
                year_selection = mode
            else:
                raise HeaderTemplateError(f'Unknown instruction: "{keyword}".', line=i, source=name)

        while lines and lines[0].is_empty:
            lines.pop(0)
        while lines and lines[-1].is_empty:
            lines.pop()

        variables.update(DEFAULT_VARIABLES)
        undeclared: list[str] = sorted(
            {
                tok.name
                for line in lines
                for tok in line.tokens
                if isinstance(tok, VarToken) and tok.name not in variables
            }
        )
        if undeclared:
            raise HeaderTemplateError(
                f"Undeclared variables found: {', '.join(undeclared)}.", source=name
            )

        logger.debug(
            "Parsed template '%s': %d line(s), %d variable(s), year selection %s",
            name,
            len(lines),
            len(variables),
            year_selection.value,
        )
        return cls(
            name=name, lines=tuple(lines), variables=variables, year_selection=year_selection
        )

    # -------------------------------------------------------------- matching

    def _match_line(self, index: int, text: str, values: dict[str, object]) -> str | None:
        line: TemplateLine = self.lines[index]
        match = self._patterns[index].fullmatch(text)
        if match is None:
            return f'expected "{line.source}", got "{text}"'

        found: dict[str, object] = {}
        for idx, tok in enumerate(line.tokens):
            if not isinstance(tok, VarToken):
                continue
            value: object = self.variables[tok.name].parse(match.group(f"v{idx}"))
            previous: object | None = found.get(tok.name, values.get(tok.name))
            if previous is not None and previous != value:
                return f'diverging values for "{tok.name}"'
            found[tok.name] = value
        values.update(found)
        return None

    def match(self, header: Sequence[str]) -> TemplateMatch:
        """Match existing header lines against this template.

        Template and header lines are walked together; an optional template
        line that does not fit the current header line is skipped. Values
        collected before a failure are kept in the result so that a rewrite
        can preserve them (e.g. the original creation year).

        Args:
            header (Sequence[str]): The existing header lines.

        Returns:
            TemplateMatch: The collected values, with ``error`` set on failure.
        """
        values: dict[str, object] = {}
        present: set[int] = set()
        rule_idx: int = 0

        for header_idx, text in enumerate(header):
            if rule_idx >= len(self.lines):
                return TemplateMatch(
                    values, frozenset(present), "unexpected extra header lines", header_idx
                )
            while (error := self._match_line(rule_idx, text, values)) is not None:
                if self.lines[rule_idx].optional and rule_idx + 1 < len(self.lines):
                    rule_idx += 1
                    continue
                return TemplateMatch(values, frozenset(present), error, header_idx)
            if self.lines[rule_idx].optional:
                present.add(rule_idx)
            rule_idx += 1

        return TemplateMatch(values, frozenset(present))

    # ------------------------------------------------------------- rendering

    def render(
        self,
        context: HeaderFileContext,
        match: TemplateMatch | None = None,
    ) -> tuple[str, ...]:
        """Render the up-to-date header lines for ``context``.

        Args:
            context (HeaderFileContext): Facts about the file.
            match (TemplateMatch | None): Values and optional lines found in the
                existing header; None for a file without header.

        Returns:
            tuple[str, ...]: The header lines, empty lines trimmed at both ends.
        """
        values: Mapping[str, object] = match.variables if match is not None else {}
        present: frozenset[int] = match.present_optional if match is not None else frozenset()

        out: list[str] = []
        for index, line in enumerate(self.lines):
            if line.optional and index not in present:
                continue
            parts: list[str] = []
            for tok in line.tokens:
                if isinstance(tok, TextToken):
                    parts.append(tok.text)
                else:
                    var_type: VariableType = self.variables[tok.name]
                    current = var_type.up_to_date(context, values.get(tok.name))
                    parts.append(var_type.render(current))
            out.append("".join(parts))
        return _trim_empty(out)
