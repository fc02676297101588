# licensemark:header:start
#
#   project      : LicenseMark
#   file         : resolver.py
#   file_relpath : src/licensemark/rules/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Map files to the rule (header format + templates) that governs them.

Rules carry gitignore-style include patterns, matched against the path
relative to the project root. Exclude patterns (configured plus
`DEFAULT_EXCLUDES`) win over every rule: an excluded file is never resolved,
reported or rewritten.

Exactly one rule may match a file. When several do, the configuration is
ambiguous; `RuleResolver.resolve_all` reports every such file at once, before
any file is read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.constants import DEFAULT_EXCLUDES
from licensemark.core.errors import RuleAmbiguityError
from licensemark.formats.registry import format_for_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from licensemark.formats.base import HeaderFormat
    from licensemark.rules.template import HeaderTemplate

logger: LicenseMarkLogger = get_logger(__name__)


def rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style path relative to ``base`` (absolute as fallback)."""
    resolved: Path = path.resolve()
    try:
        return resolved.relative_to(base.resolve()).as_posix()
    except ValueError:
        return resolved.as_posix()


@dataclass(frozen=True)
class HeaderRule:
    """A file pattern mapped to a header format and license templates.

    Attributes:
        name (str): Rule name, used in reports.
        include (tuple[str, ...]): Gitignore-style patterns selecting the files.
        templates (tuple[HeaderTemplate, ...]): Accepted templates; the first
            one is the default used for new and rewritten headers.
        format (HeaderFormat | None): The comment syntax, or None to infer it
            from each file's name.
    """

    name: str
    include: tuple[str, ...]
    templates: tuple[HeaderTemplate, ...]
    format: HeaderFormat | None = None
    _spec: PathSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.templates:
            raise ValueError(f"Rule '{self.name}' has no license template")
        object.__setattr__(self, "_spec", PathSpec.from_lines(GitWildMatchPattern, self.include))

    @property
    def default_template(self) -> HeaderTemplate:
        """Return the template used to write headers."""
        return self.templates[0]

    def matches(self, rel_path: str) -> bool:
        """Return True if the POSIX relative path is selected by this rule."""
        return self._spec.match_file(rel_path)


@dataclass(frozen=True, slots=True)
class Resolution:
    """A file together with the rule and format that apply to it."""

    path: Path
    rule: HeaderRule
    format: HeaderFormat


@dataclass(slots=True)
class ResolvedBatch:
    """Result of resolving a set of paths.

    Attributes:
        resolved (list[Resolution]): Files with exactly one rule and a known format.
        skipped (list[tuple[Path, str]]): Files no rule applies to, with the reason.
    """

    resolved: list[Resolution] = field(default_factory=lambda: [])
    skipped: list[tuple[Path, str]] = field(default_factory=lambda: [])


class RuleResolver:
    """Resolve files against an ordered list of rules.

    Args:
        rules (Sequence[HeaderRule]): The configured rules.
        root (Path): Directory include and exclude patterns are relative to.
        exclude (Sequence[str]): Extra exclude patterns.
    """

    def __init__(
        self,
        rules: Sequence[HeaderRule],
        *,
        root: Path,
        exclude: Sequence[str] = (),
    ) -> None:
        self.rules: tuple[HeaderRule, ...] = tuple(rules)
        self.root: Path = root
        self.exclude: tuple[str, ...] = (*DEFAULT_EXCLUDES, *exclude)
        self._exclude_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, self.exclude)

    def is_excluded(self, path: Path) -> bool:
        """Return True if ``path`` matches an exclude pattern."""
        return self._exclude_spec.match_file(rel_for_match(path, self.root))

    def matching_rules(self, path: Path) -> list[HeaderRule]:
        """Return every rule whose include patterns select ``path``."""
        rel: str = rel_for_match(path, self.root)
        return [rule for rule in self.rules if rule.matches(rel)]

    def _resolve_one(self, path: Path, rules: list[HeaderRule]) -> Resolution | str:
        if not rules:
            return "no rule"
        rule: HeaderRule = rules[0]
        fmt: HeaderFormat | None = rule.format or format_for_path(path)
        if fmt is None:
            logger.warning("No header format known for %s (rule '%s'); skipping", path, rule.name)
            return f"no header format for rule '{rule.name}'"
        return Resolution(path=path, rule=rule, format=fmt)

    def resolve(self, path: Path) -> Resolution | None:
        """Resolve a single path.

        Returns:
            Resolution | None: The resolution, or None if the file is excluded
            or no rule applies.

        Raises:
            RuleAmbiguityError: If more than one rule matches.
        """
        if self.is_excluded(path):
            return None
        rules = self.matching_rules(path)
        if len(rules) > 1:
            raise RuleAmbiguityError({path: tuple(r.name for r in rules)})
        result = self._resolve_one(path, rules)
        return result if isinstance(result, Resolution) else None

    def resolve_all(self, paths: Iterable[Path]) -> ResolvedBatch:
        """Resolve every path, failing on ambiguity before returning anything.

        Excluded paths are dropped silently.

        Raises:
            RuleAmbiguityError: Listing every path matched by more than one rule.
        """
        batch = ResolvedBatch()
        ambiguous: dict[Path, tuple[str, ...]] = {}
        for path in paths:
            if self.is_excluded(path):
                logger.trace("Excluded: %s", path)
                continue
            rules = self.matching_rules(path)
            if len(rules) > 1:
                ambiguous[path] = tuple(r.name for r in rules)
                continue
            result = self._resolve_one(path, rules)
            if isinstance(result, Resolution):
                logger.trace(
                    "Resolved %s -> rule '%s' (%s)", path, result.rule.name, result.format.name
                )
                batch.resolved.append(result)
            else:
                logger.trace("Skipped %s: %s", path, result)
                batch.skipped.append((path, result))

        if ambiguous:
            raise RuleAmbiguityError(ambiguous)
        return batch
