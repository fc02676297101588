# licensemark:header:start
#
#   project      : LicenseMark
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Tests for the configuration builder and its frozen form."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest

from licensemark.config import Config, MutableConfig
from licensemark.core.errors import ConfigError
from tests.conftest import make_config, make_rule

if TYPE_CHECKING:
    from pathlib import Path


def test_freeze_and_thaw(tmp_path: Path) -> None:
    config = make_config(tmp_path, exclude=["build/"], workers=2)

    assert isinstance(config, Config)
    assert config.exclude == ("build/",)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.workers = 5  # type: ignore[misc]

    draft = config.thaw()
    draft.exclude.append("dist/")
    assert draft.freeze().exclude == ("build/", "dist/")
    assert config.exclude == ("build/",)


def test_apply_overrides(tmp_path: Path) -> None:
    draft = MutableConfig(root=tmp_path, rules=[make_rule()], exclude=["a/"], workers=8)

    draft.apply_overrides(exclude=["b/"], workers=None, debug=False)
    assert (draft.exclude, draft.workers, draft.debug) == (["a/", "b/"], 8, False)

    draft.apply_overrides(workers=2, debug=True)
    assert (draft.workers, draft.debug) == (2, True)

    # The debug flag only switches tracing on
    draft.apply_overrides(debug=False)
    assert draft.debug is True


def test_freeze_requires_rules(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="No header rules configured"):
        MutableConfig(root=tmp_path).freeze()


def test_freeze_rejects_duplicate_rule_names(tmp_path: Path) -> None:
    draft = MutableConfig(root=tmp_path, rules=[make_rule("java"), make_rule("java")])

    with pytest.raises(ConfigError, match="Duplicate rule name 'java'"):
        draft.freeze()


def test_freeze_rejects_non_positive_workers(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="'workers' must be at least 1"):
        make_config(tmp_path, workers=0)
