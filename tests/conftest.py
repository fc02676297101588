# licensemark:header:start
#
#   project      : LicenseMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Pytest configuration for the LicenseMark test suite.

This file sets up global fixtures, typed mark helpers and the logging
configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `licensemark.config.MutableConfig`, then `freeze()` it into a
    `licensemark.config.Config`. Do not mutate a frozen `Config`; call
    `Config.thaw()` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from licensemark.config import MutableConfig, logging
from licensemark.engine.context import HeaderFileContext, YearSelectionMode
from licensemark.formats import get_format
from licensemark.rules.resolver import HeaderRule
from licensemark.rules.template import HeaderTemplate

if TYPE_CHECKING:
    from pathlib import Path

    from licensemark.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

settings.register_profile("thorough", max_examples=500, deadline=None)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_licensemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level and debug switch are not forced via env.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove environment variables.
    """
    monkeypatch.delenv("LICENSEMARK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LICENSEMARK_DEBUG", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so decision traces are exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- builders ------------------------------------------------------------------------------------

APACHE_HEADER = """\
Copyright ${CREATION_YEAR} Example Corp.

Licensed under the Apache License, Version 2.0.
"""


@dataclass
class FixedContextFactory:
    """Context factory returning the same years for every file.

    Attributes:
        creation_year (int): Creation year of every file.
        last_modified_year (int): Last-modification year of every file.
        calls (list[tuple[Path, YearSelectionMode]]): Recorded invocations.
    """

    creation_year: int = 2020
    last_modified_year: int = 2025
    calls: list[tuple[Path, YearSelectionMode]] | None = None

    def __call__(self, path: Path, mode: YearSelectionMode) -> HeaderFileContext:
        if self.calls is not None:
            self.calls.append((path, mode))
        return HeaderFileContext(
            file_name=path.name,
            creation_year=self.creation_year,
            last_modified_year=self.last_modified_year,
        )


def make_template(text: str = APACHE_HEADER, name: str = "test") -> HeaderTemplate:
    """Parse ``text`` into a `HeaderTemplate`."""
    return HeaderTemplate.from_text(name, text)


def make_rule(
    name: str = "all",
    include: tuple[str, ...] = ("*",),
    *,
    texts: tuple[str, ...] = (APACHE_HEADER,),
    format_name: str | None = None,
) -> HeaderRule:
    """Return a `HeaderRule` with one template per text (default: Apache header)."""
    templates = tuple(make_template(t, f"{name}-{i}") for i, t in enumerate(texts))
    fmt = get_format(format_name) if format_name is not None else None
    return HeaderRule(name=name, include=include, templates=templates, format=fmt)


def make_config(root: Path, *rules: HeaderRule, **overrides: Any) -> Config:
    """Return a frozen `Config` rooted at ``root`` (default: one catch-all rule)."""
    draft = MutableConfig(root=root, rules=list(rules or (make_rule(),)))
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


@pytest.fixture
def context_factory() -> FixedContextFactory:
    """A context factory for files created in 2020 and modified in 2025."""
    return FixedContextFactory(calls=[])
