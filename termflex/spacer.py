"""Spacer component: flexible empty space in a layout."""

from __future__ import annotations

from dataclasses import dataclass

from termflex.element import Element, ElementType
from termflex.style import Style

__all__ = ["Spacer"]


@dataclass
class Spacer:
    """Empty box that grows to fill the free space of its container."""

    flex_grow: float = 1.0

    def into_element(self) -> Element:
        style = Style(flex_grow=float(self.flex_grow), flex_shrink=0.0)
        return Element(ElementType.BOX, style=style)