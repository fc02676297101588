# licensemark:header:start
#
#   project      : LicenseMark
#   file         : colored_enum.py
#   file_relpath : src/licensemark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# licensemark:header:end

"""Color-aware string enum used for human-facing status output.

`ColoredStrEnum` keeps the member's ``.value`` a plain string (so equality,
hashing and JSON serialization behave as usual) and stores a colorizer on the
side, exposed as ``.color``. The colorizer is any callable compatible with
``yachalk.ChalkBuilder.__call__``.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        BAD = ("bad", chalk.red)

    Outcome.OK.value          # 'ok'
    Outcome.OK.color("hi")    # green "hi"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the given arguments.

        Args:
            *args (object): Objects to render, typically a single string.
            sep (str): Separator placed between multiple arguments.

        Returns:
            str: The decorated text.
        """
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value of the member.
            color (Colorizer): Callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The new member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with the member."""
        return self._color

    def styled(self, enable_color: bool = True) -> str:
        """Return the member text, colorized when ``enable_color`` is True."""
        return self._color(self._value_) if enable_color else self._value_
