"""Terminal colours: named, 256-colour palette and 24-bit RGB."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

__all__ = ["Color"]

_NAMED = (
    "reset",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)

_HEX_PAIR = re.compile(r"\+?[0-9a-fA-F]+")


def _check_byte(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be in 0..255, got {value}")
    return value


def _parse_hex_pair(chunk: bytes) -> int:
    try:
        text = chunk.decode("ascii")
    except UnicodeDecodeError:
        return 0
    if not _HEX_PAIR.fullmatch(text):
        return 0
    return int(text, 16)


@dataclass(frozen=True)
class Color:
    """A terminal colour.

    ``name`` is one of the named colours, ``"ansi256"`` (``value`` holds the
    palette index) or ``"rgb"`` (``value`` holds the three channels).
    """

    name: str = "reset"
    value: tuple[int, ...] = ()

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    BRIGHT_BLACK: ClassVar[Color]
    BRIGHT_RED: ClassVar[Color]
    BRIGHT_GREEN: ClassVar[Color]
    BRIGHT_YELLOW: ClassVar[Color]
    BRIGHT_BLUE: ClassVar[Color]
    BRIGHT_MAGENTA: ClassVar[Color]
    BRIGHT_CYAN: ClassVar[Color]
    BRIGHT_WHITE: ClassVar[Color]

    def __post_init__(self) -> None:
        if self.name in _NAMED:
            if self.value:
                raise ValueError(f"named colour {self.name!r} takes no value")
        elif self.name == "ansi256":
            if len(self.value) != 1:
                raise ValueError("ansi256 colour takes exactly one value")
            _check_byte(self.value[0], "palette index")
        elif self.name == "rgb":
            if len(self.value) != 3:
                raise ValueError("rgb colour takes exactly three values")
            for channel in self.value:
                _check_byte(channel, "channel")
        else:
            raise ValueError(f"unknown colour name {self.name!r}")

    @classmethod
    def hex(cls, value: str) -> Color:
        """Parse ``"#rrggbb"`` or ``"rrggbb"``.

        A string of the wrong length yields the reset colour; a pair that is
        not valid hexadecimal counts as 0.
        """
        digits = value.lstrip("#").encode("utf-8")
        if len(digits) != 6:
            return cls.RESET
        r, g, b = (_parse_hex_pair(digits[i : i + 2]) for i in (0, 2, 4))
        return cls("rgb", (r, g, b))

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """A 24-bit colour."""
        return cls("rgb", (r, g, b))

    @classmethod
    def ansi256(cls, code: int) -> Color:
        """A colour from the 256-colour palette."""
        return cls("ansi256", (code,))

    def __repr__(self) -> str:
        if self.name == "ansi256":
            return f"Color.ansi256({self.value[0]})"
        if self.name == "rgb":
            return "Color.rgb({}, {}, {})".format(*self.value)
        return f"Color.{self.name.upper()}"


for _name in _NAMED:
    setattr(Color, _name.upper(), Color(_name))
del _name