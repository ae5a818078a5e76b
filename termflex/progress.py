"""Progress bars and gauges."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from termflex.box import Box
from termflex.color import Color
from termflex.element import Element
from termflex.text import Line, Span, Text

__all__ = ["ProgressSymbols", "Progress", "Gauge"]


def _f32(value: float) -> float:
    """Round to single precision, the precision progress values are kept in."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _unit(value: float) -> float:
    return _f32(min(max(float(value), 0.0), 1.0))


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


def _percent(progress: float) -> str:
    return f" {_f32(progress * 100.0):3.0f}%"


@dataclass(frozen=True)
class ProgressSymbols:
    """Glyphs for the filled and empty parts, the head and the brackets."""

    filled: str = "█"
    empty: str = "░"
    head: str | None = None
    bracket_left: str | None = "["
    bracket_right: str | None = "]"

    @classmethod
    def block(cls) -> ProgressSymbols:
        return cls()

    @classmethod
    def line(cls) -> ProgressSymbols:
        return cls("━", "─", "╸", None, None)

    @classmethod
    def dot(cls) -> ProgressSymbols:
        return cls("●", "○", None, "⟨", "⟩")

    @classmethod
    def ascii(cls) -> ProgressSymbols:
        return cls("#", "-", ">", "[", "]")

    @classmethod
    def thin(cls) -> ProgressSymbols:
        return cls("─", " ", "●", None, None)


def _check_width(width: int) -> None:
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError("width must be an int")
    if width < 0:
        raise ValueError(f"width must not be negative, got {width}")


@dataclass
class Progress:
    """A progress bar ``width`` cells wide, brackets included.

    ``progress`` is clamped to 0..1.
    """

    progress: float = 0.0
    width: int = 20
    symbols: ProgressSymbols = field(default_factory=ProgressSymbols)
    filled_color: Color | None = None
    empty_color: Color | None = None
    show_percent: bool = False
    label: str | None = None
    key: str | None = None

    def __post_init__(self) -> None:
        self.progress = _unit(self.progress)
        _check_width(self.width)

    @classmethod
    def from_ratio(cls, current: int, total: int, **kwargs) -> Progress:
        """Progress of ``current`` out of ``total``; a total of 0 means none."""
        ratio = 0.0 if total == 0 else _f32(_f32(float(current)) / _f32(float(total)))
        return cls(progress=ratio, **kwargs)

    def into_element(self) -> Element:
        symbols = self.symbols
        spans: list[Span] = []

        if symbols.bracket_left is not None:
            spans.append(Span(symbols.bracket_left))

        brackets = (symbols.bracket_left is not None) + (symbols.bracket_right is not None)
        bar_width = max(self.width - brackets, 0)
        filled = _round(_f32(self.progress * bar_width))
        empty = max(bar_width - filled, 0)

        has_head = symbols.head is not None and 0 < filled < bar_width
        solid = filled - 1 if has_head else filled

        if solid > 0:
            span = Span(symbols.filled * solid)
            if self.filled_color is not None:
                span.color(self.filled_color)
            spans.append(span)

        if has_head:
            span = Span(symbols.head)
            if self.filled_color is not None:
                span.color(self.filled_color)
            spans.append(span)

        if empty > 0:
            span = Span(symbols.empty * empty)
            if self.empty_color is not None:
                span.color(self.empty_color)
            else:
                span.dim()
            spans.append(span)

        if symbols.bracket_right is not None:
            spans.append(Span(symbols.bracket_right))

        if self.show_percent:
            spans.append(Span(_percent(self.progress)))
        if self.label is not None:
            spans.append(Span(f" {self.label}"))

        container = Box().child(Text.from_line(Line(spans)).into_element())
        if self.key is not None:
            container.key(self.key)
        return container.into_element()


_GAUGE_WIDTH = 10


@dataclass
class Gauge:
    """A compact ten-cell gauge followed by a percentage and optional label."""

    progress: float = 0.0
    label: str | None = None
    color: Color | None = None
    key: str | None = None

    def __post_init__(self) -> None:
        self.progress = _unit(self.progress)

    def into_element(self) -> Element:
        filled = _round(_f32(self.progress * _GAUGE_WIDTH))
        empty = _GAUGE_WIDTH - filled

        filled_span = Span("█" * filled)
        percent_span = Span(_percent(self.progress))
        if self.color is not None:
            filled_span.color(self.color)
            percent_span.color(self.color)

        spans = [filled_span, Span("░" * empty).dim(), percent_span.bold()]
        if self.label is not None:
            spans.append(Span(f" {self.label}"))

        container = Box().child(Text.from_line(Line(spans)).into_element())
        if self.key is not None:
            container.key(self.key)
        return container.into_element()