"""Scrollable containers: overflow clipping and virtual scrolling."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from termflex.box import Box
from termflex.color import Color
from termflex.element import Element
from termflex.style import BorderStyle, Dimension, Edges, FlexDirection, Overflow

__all__ = ["ScrollableBox", "virtual_scroll_view", "fixed_bottom_layout"]

T = TypeVar("T")


class ScrollableBox:
    """A column container that clips vertical overflow.

    Every setter returns the scrollable box itself.
    """

    def __init__(self) -> None:
        self._inner = Box().overflow_y(Overflow.HIDDEN).flex_direction(FlexDirection.COLUMN)
        self.show_scrollbar = False
        self.scrollbar_color_value: Color | None = None

    def height(self, height: Dimension | int | float) -> ScrollableBox:
        self._inner.height(height)
        return self

    def width(self, width: Dimension | int | float) -> ScrollableBox:
        self._inner.width(width)
        return self

    def scroll_offset_y(self, offset: int) -> ScrollableBox:
        self._inner.scroll_offset_y(offset)
        return self

    def scroll_offset_x(self, offset: int) -> ScrollableBox:
        self._inner.scroll_offset_x(offset)
        return self

    def flex_grow(self, grow: float) -> ScrollableBox:
        self._inner.flex_grow(grow)
        return self

    def flex_direction(self, direction: FlexDirection) -> ScrollableBox:
        self._inner.flex_direction(direction)
        return self

    def background(self, color: Color) -> ScrollableBox:
        self._inner.background(color)
        return self

    def border_style(self, style: BorderStyle) -> ScrollableBox:
        self._inner.border_style(style)
        return self

    def border_color(self, color: Color) -> ScrollableBox:
        self._inner.border_color(color)
        return self

    def padding(self, padding: Edges | int | float) -> ScrollableBox:
        self._inner.padding(padding)
        return self

    def scrollbar(self, show: bool) -> ScrollableBox:
        self.show_scrollbar = bool(show)
        return self

    def scrollbar_color(self, color: Color) -> ScrollableBox:
        self.scrollbar_color_value = color
        return self

    def child(self, element: Element) -> ScrollableBox:
        self._inner.child(element)
        return self

    def children(self, elements: Iterable[Element]) -> ScrollableBox:
        self._inner.children(elements)
        return self

    def into_element(self) -> Element:
        return self._inner.into_element()


def virtual_scroll_view(
    items: Sequence[T],
    scroll_offset: int,
    viewport_height: int,
    render_item: Callable[[T, int], Element],
) -> Element:
    """Render only the items that fall inside the viewport.

    ``render_item`` is called with each visible item and its index in ``items``.
    """
    start = min(scroll_offset, len(items))
    end = min(scroll_offset + viewport_height, len(items))
    container = (
        Box()
        .flex_direction(FlexDirection.COLUMN)
        .overflow_y(Overflow.HIDDEN)
        .height(int(viewport_height))
    )
    container.children(render_item(items[index], index) for index in range(start, end))
    return container.into_element()


def fixed_bottom_layout(content: Element, bottom: Element) -> Element:
    """A full-height column: a growing, clipped content area above a fixed bottom."""
    content_area = Box().flex_grow(1.0).overflow_y(Overflow.HIDDEN).child(content).into_element()
    return (
        Box()
        .flex_direction(FlexDirection.COLUMN)
        .height(Dimension.percent(100.0))
        .child(content_area)
        .child(bottom)
        .into_element()
    )