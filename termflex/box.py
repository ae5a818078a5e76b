"""Box component: a flexbox container built up by chained calls."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from termflex.color import Color
from termflex.element import Element, ElementType
from termflex.style import (
    AlignItems,
    AlignSelf,
    BorderStyle,
    Dimension,
    Display,
    Edges,
    FlexDirection,
    JustifyContent,
    Overflow,
    Position,
    Style,
)

__all__ = ["Box"]


class Box:
    """Flexbox container. Every setter returns the box itself."""

    def __init__(self) -> None:
        self.style = Style()
        self._children: list[Element] = []
        self._key: str | None = None
        self._scroll_offset_x: int | None = None
        self._scroll_offset_y: int | None = None

    def key(self, key: str) -> Box:
        self._key = str(key)
        return self

    # Display

    def display(self, display: Display) -> Box:
        self.style.display = display
        return self

    def hidden(self) -> Box:
        self.style.display = Display.NONE
        return self

    def visible(self) -> Box:
        self.style.display = Display.FLEX
        return self

    # Flexbox

    def flex_direction(self, direction: FlexDirection) -> Box:
        self.style.flex_direction = direction
        return self

    def flex_wrap(self, wrap: bool) -> Box:
        self.style.flex_wrap = bool(wrap)
        return self

    def flex_grow(self, grow: float) -> Box:
        self.style.flex_grow = float(grow)
        return self

    def flex_shrink(self, shrink: float) -> Box:
        self.style.flex_shrink = float(shrink)
        return self

    def flex(self, value: float) -> Box:
        """Set flex grow to ``value`` and flex shrink to 1."""
        self.style.flex_grow = float(value)
        self.style.flex_shrink = 1.0
        return self

    def flex_basis(self, basis: Dimension | int | float) -> Box:
        self.style.flex_basis = Dimension.of(basis)
        return self

    def align_items(self, align: AlignItems) -> Box:
        self.style.align_items = align
        return self

    def align_self(self, align: AlignSelf) -> Box:
        self.style.align_self = align
        return self

    def justify_content(self, justify: JustifyContent) -> Box:
        self.style.justify_content = justify
        return self

    # Spacing

    def padding(self, value: Edges | int | float) -> Box:
        self.style.padding = Edges.of(value)
        return self

    def padding_top(self, value: float) -> Box:
        self.style.padding.top = float(value)
        return self

    def padding_right(self, value: float) -> Box:
        self.style.padding.right = float(value)
        return self

    def padding_bottom(self, value: float) -> Box:
        self.style.padding.bottom = float(value)
        return self

    def padding_left(self, value: float) -> Box:
        self.style.padding.left = float(value)
        return self

    def padding_x(self, value: float) -> Box:
        self.style.padding.left = self.style.padding.right = float(value)
        return self

    def padding_y(self, value: float) -> Box:
        self.style.padding.top = self.style.padding.bottom = float(value)
        return self

    def margin(self, value: Edges | int | float) -> Box:
        self.style.margin = Edges.of(value)
        return self

    def margin_top(self, value: float) -> Box:
        self.style.margin.top = float(value)
        return self

    def margin_right(self, value: float) -> Box:
        self.style.margin.right = float(value)
        return self

    def margin_bottom(self, value: float) -> Box:
        self.style.margin.bottom = float(value)
        return self

    def margin_left(self, value: float) -> Box:
        self.style.margin.left = float(value)
        return self

    def margin_x(self, value: float) -> Box:
        self.style.margin.left = self.style.margin.right = float(value)
        return self

    def margin_y(self, value: float) -> Box:
        self.style.margin.top = self.style.margin.bottom = float(value)
        return self

    def gap(self, value: float) -> Box:
        self.style.gap = float(value)
        return self

    def column_gap(self, value: float) -> Box:
        self.style.column_gap = float(value)
        return self

    def row_gap(self, value: float) -> Box:
        self.style.row_gap = float(value)
        return self

    # Size

    def width(self, value: Dimension | int | float) -> Box:
        self.style.width = Dimension.of(value)
        return self

    def height(self, value: Dimension | int | float) -> Box:
        self.style.height = Dimension.of(value)
        return self

    def min_width(self, value: Dimension | int | float) -> Box:
        self.style.min_width = Dimension.of(value)
        return self

    def min_height(self, value: Dimension | int | float) -> Box:
        self.style.min_height = Dimension.of(value)
        return self

    def max_width(self, value: Dimension | int | float) -> Box:
        self.style.max_width = Dimension.of(value)
        return self

    def max_height(self, value: Dimension | int | float) -> Box:
        self.style.max_height = Dimension.of(value)
        return self

    # Border

    def border_style(self, style: BorderStyle) -> Box:
        self.style.border_style = style
        return self

    def border_color(self, color: Color) -> Box:
        self.style.border_color = color
        return self

    def border_top_color(self, color: Color) -> Box:
        self.style.border_top_color = color
        return self

    def border_right_color(self, color: Color) -> Box:
        self.style.border_right_color = color
        return self

    def border_bottom_color(self, color: Color) -> Box:
        self.style.border_bottom_color = color
        return self

    def border_left_color(self, color: Color) -> Box:
        self.style.border_left_color = color
        return self

    def border_dim(self, dim: bool) -> Box:
        self.style.border_dim = bool(dim)
        return self

    def border(self, top: bool, right: bool, bottom: bool, left: bool) -> Box:
        """Choose which sides carry a border."""
        self.style.border_top = bool(top)
        self.style.border_right = bool(right)
        self.style.border_bottom = bool(bottom)
        self.style.border_left = bool(left)
        return self

    # Colours

    def background(self, color: Color) -> Box:
        self.style.background_color = color
        return self

    def bg(self, color: Color) -> Box:
        return self.background(color)

    # Overflow

    def overflow(self, overflow: Overflow) -> Box:
        self.style.overflow_x = overflow
        self.style.overflow_y = overflow
        return self

    def overflow_x(self, overflow: Overflow) -> Box:
        self.style.overflow_x = overflow
        return self

    def overflow_y(self, overflow: Overflow) -> Box:
        self.style.overflow_y = overflow
        return self

    # Scroll offset

    def scroll_offset_x(self, offset: int) -> Box:
        self._scroll_offset_x = int(offset)
        return self

    def scroll_offset_y(self, offset: int) -> Box:
        self._scroll_offset_y = int(offset)
        return self

    def scroll_offset(self, x: int, y: int) -> Box:
        self._scroll_offset_x = int(x)
        self._scroll_offset_y = int(y)
        return self

    # Positioning

    def position(self, position: Position) -> Box:
        self.style.position = position
        return self

    def position_absolute(self) -> Box:
        self.style.position = Position.ABSOLUTE
        return self

    def top(self, value: float) -> Box:
        self.style.top = float(value)
        return self

    def right(self, value: float) -> Box:
        self.style.right = float(value)
        return self

    def bottom(self, value: float) -> Box:
        self.style.bottom = float(value)
        return self

    def left(self, value: float) -> Box:
        self.style.left = float(value)
        return self

    # Children

    def child(self, element: Element) -> Box:
        self._children.append(element)
        return self

    def children(self, elements: Iterable[Element]) -> Box:
        self._children.extend(elements)
        return self

    def into_element(self) -> Element:
        return Element(
            ElementType.BOX,
            style=copy.deepcopy(self.style),
            children=list(self._children),
            key=self._key,
            scroll_offset_x=self._scroll_offset_x,
            scroll_offset_y=self._scroll_offset_y,
        )