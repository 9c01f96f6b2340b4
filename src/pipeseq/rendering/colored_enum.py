# topmark:header:start
#
#   project      : PipeSeq
#   file         : colored_enum.py
#   file_relpath : src/pipeseq/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

This module provides a small base enum that stores a textual value while
attaching a colorizer (a callable that decorates strings). It avoids coupling the
rest of the system to a specific color library.

Design:
    `ColoredStrEnum` keeps `_value_` as the plain `str` and stores the color
    function separately (`_color`). This preserves Enum semantics (hashing,
    equality, `repr`). The colorizer can be any callable that matches the
    `Colorizer` protocol; in practice it is a yachalk `ChalkBuilder`.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK    = ("ok", chalk.green)
        ERROR = ("error", chalk.red_bright)

    print(Outcome.OK.value)            # 'ok'
    print(Outcome.OK.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic list
    of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color
