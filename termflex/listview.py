"""List component: a selectable, scrollable list of items."""

from __future__ import annotations

import copy
import itertools
from collections.abc import Iterable
from dataclasses import dataclass, field

from termflex.box import Box
from termflex.element import Element
from termflex.style import FlexDirection, Style
from termflex.text import Line, Span, Text

__all__ = ["ListItem", "ListState", "List"]


def _to_line(content: Line | str) -> Line:
    if isinstance(content, Line):
        return content
    return Line.raw(str(content))


@dataclass
class ListItem:
    """One entry of a list: a line of (possibly rich) text and an optional style."""

    content: Line | str = ""
    style: Style | None = None

    def __post_init__(self) -> None:
        self.content = _to_line(self.content)

    @classmethod
    def from_spans(cls, spans: Iterable[Span]) -> ListItem:
        return cls(Line(list(spans)))


def _as_item(item: ListItem | Line | str) -> ListItem:
    return item if isinstance(item, ListItem) else ListItem(item)


@dataclass
class ListState:
    """Selected index (or None) and scroll offset of a list."""

    selected: int | None = None
    offset: int = 0

    def select_next(self, length: int) -> None:
        """Move the selection down, stopping at the last item."""
        if length <= 0:
            self.selected = None
            return
        self.selected = 0 if self.selected is None else min(self.selected + 1, length - 1)

    def select_previous(self, length: int) -> None:
        """Move the selection up, stopping at the first item."""
        if length <= 0:
            self.selected = None
            return
        self.selected = 0 if self.selected is None else max(self.selected - 1, 0)

    def select_first(self, length: int) -> None:
        if length > 0:
            self.selected = 0

    def select_last(self, length: int) -> None:
        if length > 0:
            self.selected = length - 1

    def select(self, index: int | None) -> None:
        self.selected = index

    def scroll_to_selected(self, viewport_height: int) -> None:
        """Shift the offset so that the selected item lies inside the viewport."""
        if self.selected is None:
            return
        if self.selected < self.offset:
            self.offset = self.selected
        elif self.selected >= self.offset + viewport_height:
            if viewport_height < 1:
                raise ValueError(f"viewport_height must be at least 1, got {viewport_height}")
            self.offset = max(self.selected - (viewport_height - 1), 0)


def _highlight(text: Text, style: Style) -> Text:
    if style.color is not None:
        text.color(style.color)
    if style.background_color is not None:
        text.background(style.background_color)
    if style.bold:
        text.bold()
    if style.inverse:
        text.inverse()
    return text


@dataclass
class List:
    """A list of items; strings are turned into plain items."""

    items: Iterable[ListItem | Line | str] = field(default_factory=list)
    highlight_style: Style = field(default_factory=Style)
    highlight_symbol: str | None = None
    show_selection: bool = True
    key: str | None = None

    def __post_init__(self) -> None:
        self.items = [_as_item(item) for item in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def render(self, state: ListState | None = None, viewport_height: int | None = None) -> Element:
        """Render the visible items, highlighting the selected one.

        Without ``viewport_height`` every item from the offset on is shown.
        """
        if state is None:
            state = ListState()
        height = len(self.items) if viewport_height is None else viewport_height
        symbol = self.highlight_symbol
        # Unselected rows are padded by the symbol's encoded length.
        pad = " " * len(symbol.encode("utf-8")) if symbol is not None else ""

        container = Box().flex_direction(FlexDirection.COLUMN)
        if self.key is not None:
            container.key(self.key)

        start = max(state.offset, 0)
        visible = itertools.islice(enumerate(self.items), start, start + max(height, 0))
        for index, item in visible:
            is_selected = self.show_selection and state.selected == index
            spans: list[Span] = []
            if symbol is not None:
                spans.append(Span(symbol if is_selected else pad))
            spans.extend(copy.deepcopy(item.content.spans))

            text = Text.from_line(Line(spans))
            if is_selected:
                _highlight(text, self.highlight_style)
            elif item.style is not None and item.style.color is not None:
                text.color(item.style.color)
            container.child(text.into_element())

        return container.into_element()

    def into_element(self) -> Element:
        """Render with nothing selected."""
        return self.render(ListState())