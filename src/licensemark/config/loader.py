# licensemark:header:start
#
#   project      : LicenseMark
#   file         : loader.py
#   file_relpath : src/licensemark/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Load LicenseMark configuration from TOML.

Sources, in order of discovery from the working directory:

1. ``licensemark.toml`` (settings at the top level);
2. ``pyproject.toml`` with a ``[tool.licensemark]`` table.

Example:
    ```toml
    exclude = ["build/", "**/generated/**"]
    project_creation_year = 2021
    workers = 8

    [[rules]]
    name = "java"
    include = ["src/**/*.java"]
    format = "cblock"
    license = "codeformat/HEADER"
    alternatives = ["codeformat/OLD_HEADER"]

    [[rules]]
    name = "html"
    include = ["**/*.html"]
    text = "Copyright ${CREATION_YEAR} Example Corp."
    ```

Paths (``license``, ``alternatives``) and patterns are relative to the
directory of the configuration file. Parsing is done with ``tomlkit``; every
problem is reported as `ConfigError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from licensemark.config.logging import LicenseMarkLogger, get_logger
from licensemark.config.model import MutableConfig
from licensemark.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE
from licensemark.core.errors import ConfigError
from licensemark.formats import get_format, registered_formats
from licensemark.rules.resolver import HeaderRule
from licensemark.rules.template import HeaderTemplate

if TYPE_CHECKING:
    from collections.abc import Mapping

    from licensemark.formats.base import HeaderFormat

logger: LicenseMarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def _tool_table(path: Path) -> TomlTable | None:
    data: TomlTable = load_toml_dict(path)
    tool: Any = data.get("tool")
    if isinstance(tool, dict):
        table: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_TABLE)
        if isinstance(table, dict):
            return cast("TomlTable", table)
    return None


def find_config_file(start: Path) -> Path | None:
    """Return the configuration file to use for ``start``, or None.

    ``licensemark.toml`` wins over ``pyproject.toml``; the latter only counts
    when it has a ``[tool.licensemark]`` table.
    """
    candidate: Path = start / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = start / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _tool_table(pyproject) is not None:
        return pyproject
    return None


# --- typed accessors ---------------------------------------------------------


def _get_str(table: Mapping[str, Any], key: str, where: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{where}: '{key}' must be a string, got {type(value).__name__}")
    return value


def _get_str_list(table: Mapping[str, Any], key: str, where: str) -> list[str]:
    value: Any = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    raise ConfigError(f"{where}: '{key}' must be a string or a list of strings")


def _get_int(table: Mapping[str, Any], key: str, where: str) -> int | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{where}: '{key}' must be an integer")
    return value


def _get_bool(table: Mapping[str, Any], key: str, where: str) -> bool | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"{where}: '{key}' must be true or false")
    return value


# --- rules -------------------------------------------------------------------


def _read_template(base_dir: Path, rel: str, where: str) -> HeaderTemplate:
    path: Path = (base_dir / rel).resolve()
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"{where}: cannot read license file {rel}: {exc}") from exc
    return HeaderTemplate.from_text(rel, text)


def _build_rule(entry: Mapping[str, Any], index: int, base_dir: Path, source: str) -> HeaderRule:
    name: str = _get_str(entry, "name", f"{source}: rules[{index}]") or f"rule-{index + 1}"
    where: str = f"{source}: rule '{name}'"

    include: list[str] = _get_str_list(entry, "include", where)
    if not include:
        raise ConfigError(f"{where}: 'include' must list at least one pattern")

    fmt: HeaderFormat | None = None
    format_name: str | None = _get_str(entry, "format", where)
    if format_name is not None:
        fmt = get_format(format_name)
        if fmt is None:
            known = ", ".join(sorted(registered_formats()))
            raise ConfigError(f"{where}: unknown format '{format_name}' (known: {known})")

    license_path: str | None = _get_str(entry, "license", where)
    text: str | None = _get_str(entry, "text", where)
    if (license_path is None) == (text is None):
        raise ConfigError(f"{where}: exactly one of 'license' or 'text' is required")

    templates: list[HeaderTemplate] = []
    if license_path is not None:
        templates.append(_read_template(base_dir, license_path, where))
    else:
        templates.append(HeaderTemplate.from_text(name, cast("str", text)))
    templates.extend(
        _read_template(base_dir, alt, where) for alt in _get_str_list(entry, "alternatives", where)
    )

    for template in templates:
        if not template.lines:
            raise ConfigError(f"{where}: license template '{template.name}' is empty")

    logger.debug(
        "Rule '%s': %d pattern(s), format %s, %d template(s)",
        name,
        len(include),
        fmt.name if fmt is not None else "<by extension>",
        len(templates),
    )
    return HeaderRule(name=name, include=tuple(include), templates=tuple(templates), format=fmt)


def parse_config(data: Mapping[str, Any], *, base_dir: Path, source: str) -> MutableConfig:
    """Build a `MutableConfig` from a parsed configuration table.

    Args:
        data (Mapping[str, Any]): The top-level (or ``[tool.licensemark]``) table.
        base_dir (Path): Directory relative paths and patterns refer to.
        source (str): Name of the source, for error messages.

    Returns:
        MutableConfig: The configuration builder.

    Raises:
        ConfigError: On any invalid value.
    """
    raw_rules: Any = data.get("rules", [])
    if not isinstance(raw_rules, list):
        raise ConfigError(f"{source}: 'rules' must be an array of tables ([[rules]])")

    rules: list[HeaderRule] = []
    for index, entry in enumerate(cast("list[Any]", raw_rules)):
        if not isinstance(entry, dict):
            raise ConfigError(f"{source}: rules[{index}] must be a table")
        rules.append(_build_rule(cast("TomlTable", entry), index, base_dir, source))

    return MutableConfig(
        root=base_dir,
        rules=rules,
        exclude=_get_str_list(data, "exclude", source),
        project_creation_year=_get_int(data, "project_creation_year", source),
        debug=bool(_get_bool(data, "debug", source)),
        workers=_get_int(data, "workers", source),
    )


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> MutableConfig:
    """Load the configuration from ``path`` or discover it from ``cwd``.

    Args:
        path (Path | None): Explicit configuration file.
        cwd (Path | None): Directory to discover a configuration file in
            (defaults to the current working directory).

    Returns:
        MutableConfig: The configuration builder.

    Raises:
        ConfigError: If no configuration is found or it is invalid.
    """
    if path is None:
        start: Path = cwd or Path.cwd()
        path = find_config_file(start)
        if path is None:
            raise ConfigError(
                f"No configuration found in {start} "
                f"(expected {CONFIG_FILE_NAME} or "
                f"[tool.{PYPROJECT_TOOL_TABLE}] in {PYPROJECT_FILE_NAME})"
            )

    path = path.resolve()
    if path.name == PYPROJECT_FILE_NAME:
        table: TomlTable | None = _tool_table(path)
        if table is None:
            raise ConfigError(f"{path} has no [tool.{PYPROJECT_TOOL_TABLE}] table")
    else:
        table = load_toml_dict(path)

    logger.info("Loading configuration from %s", path)
    config: MutableConfig = parse_config(table, base_dir=path.parent, source=path.name)
    config.config_file = path
    return config
