# licensemark:header:start
#
#   project      : LicenseMark
#   file         : model.py
#   file_relpath : src/licensemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Immutable runtime configuration and its mutable builder.

Build a `MutableConfig` (from TOML via `licensemark.config.loader`, or by
hand in tests), apply CLI overrides, then `freeze()` it into a `Config`. Do
not mutate a frozen `Config`; use `Config.thaw()` to get a builder back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from licensemark.rules.resolver import HeaderRule

logger: LicenseMarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        root (Path): Directory rule and exclude patterns are relative to
            (the directory of the configuration file).
        rules (tuple[HeaderRule, ...]): Header rules, in declaration order.
        exclude (tuple[str, ...]): Exclude patterns on top of the built-in ones.
        project_creation_year (int | None): Creation year for ``project`` year
            selection; None uses the year of the first commit.
        debug (bool): Emit the per-file decision trace.
        workers (int | None): Worker threads; None uses the executor default.
        config_file (Path | None): The file the configuration was read from.
    """

    root: Path
    rules: tuple[HeaderRule, ...]
    exclude: tuple[str, ...] = ()
    project_creation_year: int | None = None
    debug: bool = False
    workers: int | None = None
    config_file: Path | None = None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            root=self.root,
            rules=list(self.rules),
            exclude=list(self.exclude),
            project_creation_year=self.project_creation_year,
            debug=self.debug,
            workers=self.workers,
            config_file=self.config_file,
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder; see `Config` for the field meanings."""

    root: Path = field(default_factory=Path.cwd)
    rules: list[HeaderRule] = field(default_factory=lambda: [])
    exclude: list[str] = field(default_factory=lambda: [])
    project_creation_year: int | None = None
    debug: bool = False
    workers: int | None = None
    config_file: Path | None = None

    def apply_overrides(
        self,
        *,
        exclude: Iterable[str] = (),
        workers: int | None = None,
        debug: bool = False,
    ) -> MutableConfig:
        """Merge command-line overrides into this builder and return it.

        Exclude patterns are added to the configured ones, ``workers``
        replaces the configured value when given and ``debug`` can only switch
        tracing on.
        """
        self.exclude.extend(exclude)
        if workers is not None:
            self.workers = workers
        if debug:
            self.debug = True
        return self

    def freeze(self) -> Config:
        """Validate this builder and return the immutable `Config`.

        Raises:
            ConfigError: If no rule is configured, rule names repeat or the
                worker count is not positive.
        """
        if not self.rules:
            raise ConfigError("No header rules configured")
        seen: set[str] = set()
        for rule in self.rules:
            if rule.name in seen:
                raise ConfigError(f"Duplicate rule name '{rule.name}'")
            seen.add(rule.name)
        if self.workers is not None and self.workers < 1:
            raise ConfigError(f"'workers' must be at least 1, got {self.workers}")

        logger.debug(
            "Freezing config: %d rule(s), %d exclude pattern(s), root %s",
            len(self.rules),
            len(self.exclude),
            self.root,
        )
        return Config(
            root=self.root,
            rules=tuple(self.rules),
            exclude=tuple(self.exclude),
            project_creation_year=self.project_creation_year,
            debug=self.debug,
            workers=self.workers,
            config_file=self.config_file,
        )
