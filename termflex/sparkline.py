"""Sparkline component: a one-line graph drawn with block characters."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from termflex.box import Box
from termflex.color import Color
from termflex.element import Element
from termflex.text import Text

__all__ = ["Sparkline"]

_BLOCKS = "▁▂▃▄▅▆▇█"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class Sparkline:
    """Graph of ``data``; ``minimum``/``maximum`` default to the data's range."""

    data: Iterable[float] = field(default_factory=list)
    width: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    color: Color | None = None
    show_baseline: bool = False
    key: str | None = None

    def __post_init__(self) -> None:
        self.data = [float(v) for v in self.data]

    def sample(self, width: int) -> list[float]:
        """Average the data into ``width`` buckets."""
        data = self.data
        if width <= 0 or not data:
            return []
        step = len(data) / width
        result = []
        for i in range(width):
            start = int(i * step)
            end = min(int((i + 1) * step), len(data))
            if start < end:
                bucket = data[start:end]
                result.append(sum(bucket) / len(bucket))
            elif start < len(data):
                result.append(data[start])
        return result

    def _block(self, value: float, low: float, span: float) -> str:
        normalized = 0.5 if span == 0.0 else min(max((value - low) / span, 0.0), 1.0)
        if self.show_baseline and normalized == 0.0:
            return _BLOCKS[0]
        return _BLOCKS[min(_round_half_up(normalized * 7.0), 7)]

    def into_element(self) -> Element:
        if not self.data:
            return Box().into_element()

        low = self.minimum if self.minimum is not None else min(self.data)
        high = self.maximum if self.maximum is not None else max(self.data)
        span = high - low

        width = self.width if self.width is not None else len(self.data)
        shown = self.sample(width) if len(self.data) > width else self.data

        chars = "".join(self._block(v, low, span) for v in shown).ljust(width)

        text = Text(chars)
        if self.color is not None:
            text = text.color(self.color)
        container = Box().child(text.into_element())
        if self.key is not None:
            container = container.key(self.key)
        return container.into_element()