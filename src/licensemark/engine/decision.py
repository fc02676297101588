# licensemark:header:start
#
#   project      : LicenseMark
#   file         : decision.py
#   file_relpath : src/licensemark/engine/decision.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Compare an existing header with its rule and decide what the file needs.

Tolerated differences are exactly the template placeholders: a header whose
placeholders already carry their up-to-date values (for instance a year range
that covers the last-modified year) matches; otherwise it is stale. The
decision logic itself knows nothing about years or file names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from yachalk import chalk

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.core.enum_mixins import EnumIntrospectionMixin
from licensemark.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Sequence

    from licensemark.engine.context import HeaderFileContext, YearSelectionMode
    from licensemark.formats.base import HeaderReadResult
    from licensemark.rules.template import HeaderTemplate, TemplateMatch

logger: LicenseMarkLogger = get_logger(__name__)

ContextProvider = Callable[["YearSelectionMode"], "HeaderFileContext"]


class Decision(EnumIntrospectionMixin, ColoredStrEnum):
    """What a file's header needs."""

    MATCHES = ("up to date", chalk.green)
    MISSING = ("missing", chalk.blue)
    STALE = ("stale", chalk.yellow)
    UNPARSEABLE = ("unparseable", chalk.red_bright)

    @property
    def is_violation(self) -> bool:
        """Return True for every decision but `MATCHES`."""
        return self is not Decision.MATCHES


@dataclass(frozen=True, slots=True)
class Verdict:
    """The decision for one file, with what is needed to act on it.

    Attributes:
        decision (Decision): The decision.
        read (HeaderReadResult): The header as read from the file.
        expected (tuple[str, ...] | None): The up-to-date header lines; None
            for `Decision.UNPARSEABLE`.
        template (HeaderTemplate | None): The template ``expected`` was rendered from.
        errors (tuple[str, ...]): Why the header is stale or unparseable.
    """

    decision: Decision
    read: HeaderReadResult
    expected: tuple[str, ...] | None
    template: HeaderTemplate | None = None
    errors: tuple[str, ...] = ()


def decide(
    read: HeaderReadResult,
    templates: Sequence[HeaderTemplate],
    context_for: ContextProvider,
) -> Verdict:
    """Decide whether a header matches, is missing, stale or unparseable.

    Templates are tried in order; the first one the existing header fits
    renders the expected header. A header that fits none of them is stale and
    gets the default (first) template, seeded with whatever values the default
    template could read from it.

    A run of line comments whose first line fits no template is not a license
    header at all but a build constraint or a doc comment; the header is
    missing and gets inserted above it.

    Args:
        read (HeaderReadResult): The header as read by the file's format.
        templates (Sequence[HeaderTemplate]): Accepted templates, default first.
        context_for (ContextProvider): Returns the file context for a year
            selection mode; only called when a header must be rendered.

    Returns:
        Verdict: The decision.
    """
    default: HeaderTemplate = templates[0]

    if read.malformed:
        return Verdict(
            decision=Decision.UNPARSEABLE,
            read=read,
            expected=None,
            errors=("comment block at the top of the file is never closed",),
        )

    if read.existing is None:
        expected = default.render(context_for(default.year_selection))
        return Verdict(decision=Decision.MISSING, read=read, expected=expected, template=default)

    errors: list[str] = []
    default_match: TemplateMatch | None = None
    first_line_fits: bool = False
    for template in templates:
        match: TemplateMatch = template.match(read.existing)
        if default_match is None:
            default_match = match
        if not match.ok:
            errors.append(f"{template.name}: {match.describe()}")
            first_line_fits = first_line_fits or match.error_line != 0
            continue

        expected = template.render(context_for(template.year_selection), match)
        if expected == read.existing:
            return Verdict(
                decision=Decision.MATCHES, read=read, expected=expected, template=template
            )
        logger.trace("Header fits template '%s' but is outdated", template.name)
        return Verdict(
            decision=Decision.STALE,
            read=read,
            expected=expected,
            template=template,
            errors=(*errors, f"{template.name}: values are out of date"),
        )

    if not read.delimited and not first_line_fits:
        logger.trace("Leading comment block fits no template, keeping it below the header")
        expected = default.render(context_for(default.year_selection))
        return Verdict(
            decision=Decision.MISSING,
            read=read,
            expected=expected,
            template=default,
            errors=tuple(errors),
        )

    expected = default.render(context_for(default.year_selection), default_match)
    return Verdict(
        decision=Decision.STALE,
        read=read,
        expected=expected,
        template=default,
        errors=tuple(errors),
    )
