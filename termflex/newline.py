"""Newline component: one or more line breaks."""

from __future__ import annotations

from dataclasses import dataclass

from termflex.element import Element, ElementType
from termflex.style import Dimension, Style

__all__ = ["Newline"]


@dataclass
class Newline:
    """A run of ``count`` line breaks that spans the full width."""

    count: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError("count must be an int")
        if self.count < 0:
            raise ValueError(f"count must not be negative, got {self.count}")

    def into_element(self) -> Element:
        style = Style(
            flex_basis=Dimension.points(0),
            width=Dimension.percent(100),
            height=Dimension.points(self.count),
        )
        return Element(ElementType.TEXT, style=style, text_content="\n" * self.count)