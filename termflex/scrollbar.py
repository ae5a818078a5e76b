"""Scrollbar component: shows the scroll position within content."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum

from termflex.box import Box
from termflex.color import Color
from termflex.element import Element
from termflex.style import FlexDirection
from termflex.text import Text

__all__ = ["ScrollbarOrientation", "ScrollbarSymbols", "Scrollbar"]


def _f32(value: float) -> float:
    """Round to single precision, the precision positions are kept in."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _unit(value: float) -> float:
    return _f32(min(max(float(value), 0.0), 1.0))


class ScrollbarOrientation(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class ScrollbarSymbols:
    """Glyphs for the track, the thumb and the optional end arrows."""

    track: str = "│"
    thumb: str = "█"
    begin: str | None = "▲"
    end: str | None = "▼"

    @classmethod
    def vertical(cls) -> ScrollbarSymbols:
        return cls()

    @classmethod
    def horizontal(cls) -> ScrollbarSymbols:
        return cls("─", "█", "◄", "►")

    @classmethod
    def block(cls) -> ScrollbarSymbols:
        return cls("░", "█", None, None)

    @classmethod
    def line(cls) -> ScrollbarSymbols:
        return cls("│", "┃", None, None)

    @classmethod
    def double(cls) -> ScrollbarSymbols:
        return cls("║", "█", "╦", "╩")


@dataclass
class Scrollbar:
    """A scrollbar ``length`` cells long.

    ``position`` and ``viewport_ratio`` are fractions in 0..1. Without explicit
    ``symbols`` the glyphs follow the orientation.
    """

    orientation: ScrollbarOrientation = ScrollbarOrientation.VERTICAL
    symbols: ScrollbarSymbols | None = None
    track_color: Color | None = None
    thumb_color: Color | None = None
    position: float = 0.0
    viewport_ratio: float = 0.5
    length: int = 10
    key: str | None = None

    def __post_init__(self) -> None:
        if self.symbols is None:
            self.symbols = (
                ScrollbarSymbols.horizontal()
                if self.orientation is ScrollbarOrientation.HORIZONTAL
                else ScrollbarSymbols.vertical()
            )
        self.position = _unit(self.position)
        self.viewport_ratio = _unit(self.viewport_ratio)
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise TypeError("length must be an int")
        if self.length < 0:
            raise ValueError(f"length must not be negative, got {self.length}")

    @classmethod
    def horizontal(cls, **kwargs) -> Scrollbar:
        """A horizontal scrollbar with horizontal glyphs."""
        kwargs.setdefault("symbols", ScrollbarSymbols.horizontal())
        return cls(orientation=ScrollbarOrientation.HORIZONTAL, **kwargs)

    @classmethod
    def from_sizes(cls, content_size: int, viewport_size: int, offset: int, **kwargs) -> Scrollbar:
        """Derive position and viewport ratio from content and viewport sizes."""
        bar = cls(**kwargs)
        if content_size <= viewport_size:
            bar.position = 0.0
            bar.viewport_ratio = 1.0
        else:
            max_offset = content_size - viewport_size
            bar.position = _f32(_f32(float(offset)) / _f32(float(max_offset)))
            bar.viewport_ratio = _f32(_f32(float(viewport_size)) / _f32(float(content_size)))
        return bar

    def _cells(self) -> list[tuple[str, bool]]:
        symbols = self.symbols
        arrows = (symbols.begin is not None) + (symbols.end is not None)
        track_length = max(self.length - arrows, 0)
        if track_length == 0:
            return []

        thumb_size = math.ceil(_f32(self.viewport_ratio * track_length))
        thumb_size = min(max(thumb_size, 1), track_length)
        available = track_length - thumb_size
        thumb_start = math.floor(_f32(self.position * available) + 0.5)
        thumb_end = thumb_start + thumb_size

        cells: list[tuple[str, bool]] = []
        if symbols.begin is not None:
            cells.append((symbols.begin, False))
        for i in range(track_length):
            is_thumb = thumb_start <= i < thumb_end
            cells.append((symbols.thumb if is_thumb else symbols.track, is_thumb))
        if symbols.end is not None:
            cells.append((symbols.end, False))
        return cells

    def into_element(self) -> Element:
        cells = self._cells()
        if not cells:
            return Box().into_element()

        if self.orientation is ScrollbarOrientation.VERTICAL:
            container = Box().flex_direction(FlexDirection.COLUMN)
            if self.key is not None:
                container.key(self.key)
            for glyph, is_thumb in cells:
                text = Text(glyph)
                color = self.thumb_color if is_thumb else self.track_color
                if color is not None:
                    text.color(color)
                container.child(text.into_element())
            return container.into_element()

        text = Text("".join(glyph for glyph, _ in cells))
        if self.thumb_color is not None:
            text.color(self.thumb_color)
        container = Box()
        if self.key is not None:
            container.key(self.key)
        container.child(text.into_element())
        return container.into_element()