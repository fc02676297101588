# licensemark:header:start
#
#   project      : LicenseMark
#   file         : registry.py
#   file_relpath : src/licensemark/formats/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Name-based registry of header formats.

Formats register their singleton instance at import time; `licensemark.formats`
imports every built-in variant so that importing the package is enough to
populate the registry. Lookup is by name (from a rule) or, as a fallback, by
file name and suffix. File content is never inspected.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, TypeVar

from licensemark.config.logging import LicenseMarkLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from licensemark.formats.base import HeaderFormat

logger: LicenseMarkLogger = get_logger(__name__)

_F = TypeVar("_F", bound="HeaderFormat")

_REGISTRY: dict[str, HeaderFormat] = {}


def register_format(fmt: _F) -> _F:
    """Register ``fmt`` under its ``name`` and return it.

    Registering the same instance twice is a no-op.

    Raises:
        ValueError: If another format already uses the name.
    """
    current: HeaderFormat | None = _REGISTRY.get(fmt.name)
    if current is not None and current is not fmt:
        raise ValueError(f"Header format '{fmt.name}' is already registered ({current!r})")
    _REGISTRY[fmt.name] = fmt
    logger.trace("Registered header format %r", fmt)
    return fmt


def get_format(name: str) -> HeaderFormat | None:
    """Return the format registered as ``name``, or None."""
    return _REGISTRY.get(name)


def registered_formats() -> Mapping[str, HeaderFormat]:
    """Return a read-only view of all registered formats, keyed by name."""
    return MappingProxyType(_REGISTRY)


def format_for_path(path: Path) -> HeaderFormat | None:
    """Return the default format for ``path`` based on its name or suffix.

    Exact file names win over suffixes; suffixes compare case-insensitively.
    """
    for fmt in _REGISTRY.values():
        if path.name in fmt.filenames:
            return fmt
    suffix: str = path.suffix.lower()
    if not suffix:
        return None
    for fmt in _REGISTRY.values():
        if suffix in fmt.extensions:
            return fmt
    return None
