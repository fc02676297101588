# licensemark:header:start
#
#   project      : LicenseMark
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""LicenseMark project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint`: Ruff lint.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)
else:
    import tomlkit

    _toml_loads = cast("Callable[[str], dict[str, Any]]", lambda s: tomlkit.parse(s).unwrap())

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` at noxfile import time.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table), empty if absent.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    return _toml_loads(path.read_text(encoding="utf-8"))


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project_any = _parse_pyproject_toml().get("project")
    if not isinstance(project_any, dict):
        warnings.warn(
            f"No 'project' table in pyproject.toml; using Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    classifiers: list[str] = cast("list[str]", project_any.get("classifiers") or [])
    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in classifiers:
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(f"{int(parts[0])}.{int(parts[1])}")

    out: list[str] = sorted(versions, key=lambda s: tuple(int(p) for p in s.split(".")))
    return out or [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = get_supported_pythons()

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite and the type checker."""
    py_ver: str = str(session.python)
    session.install("-e", ".[test]", "pyright")
    session.run("pytest", "-q", "tests", "-m", "not slow", *session.posargs)
    session.run("pyright", "--pythonversion", py_ver)


@nox.session(python=PYTHONS[-1])
def property_test(session: nox.Session) -> None:
    """Run the hypothesis properties with a larger example budget."""
    session.install("-e", ".[test]")
    session.run(
        "pytest",
        "-q",
        "tests",
        "-m",
        "hypothesis",
        "--hypothesis-profile",
        "thorough",
        *session.posargs,
    )


@nox.session(python=PYTHONS[-1])
def lint(session: nox.Session) -> None:
    """Lint with ruff."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session(python=PYTHONS[-1])
def format_check(session: nox.Session) -> None:
    """Verify formatting with ruff."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session(python=PYTHONS[-1])
def format(session: nox.Session) -> None:
    """Apply formatting with ruff."""
    session.install("ruff")
    session.run("ruff", "format", ".")


@nox.session(python=PYTHONS[-1])
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate the metadata."""
    session.install("build", "twine")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
