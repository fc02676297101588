# licensemark:header:start
#
#   project      : LicenseMark
#   file         : enum_mixins.py
#   file_relpath : src/licensemark/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Generic Enum helpers (UI-agnostic).

Provided:
    - ``enum_from_name(enum_cls, name, *, case_insensitive=False)``: typed lookup
      by member name; returns ``None`` on miss.
    - ``EnumIntrospectionMixin``: adds ``value_length`` (the widest member value)
      for column alignment in reports.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar, cast

_E = TypeVar("_E", bound=Enum)


def enum_from_name(
    enum_cls: type[_E],
    key_name: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the member of ``enum_cls`` named ``key_name``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        key_name (str | None): The member name (e.g. ``"PROJECT"``).
        case_insensitive (bool): Upper-case ``key_name`` before the lookup.

    Returns:
        _E | None: The matching member, or ``None`` if not found.
    """
    if key_name is None:
        return None
    target: str = key_name.upper() if case_insensitive else key_name
    member: Any | None = enum_cls.__members__.get(target)
    return cast("_E | None", member)


class EnumIntrospectionMixin:
    """Mixin adding introspection helpers to Enum classes."""

    @classmethod
    def value_length(cls) -> int:
        """Return the length of the longest member value (0 for an empty enum)."""
        members = cast("type[Enum]", cls).__members__.values()
        return max((len(str(m.value)) for m in members), default=0)
