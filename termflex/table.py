"""Table component: rows of cells with an optional header and selection."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field

from termflex.box import Box
from termflex.color import Color
from termflex.element import Element
from termflex.style import FlexDirection, Style
from termflex.text import Line, Span, Text

__all__ = ["Cell", "Row", "TableState", "Constraint", "Table"]


@dataclass
class Cell:
    """A table cell: a line of text and an optional style."""

    content: Line | str = ""
    style: Style | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, Line):
            self.content = Line.raw(str(self.content))

    @classmethod
    def from_spans(cls, spans: Iterable[Span]) -> Cell:
        return cls(Line(list(spans)))

    def with_color(self, color: Color) -> Cell:
        """Set the cell's colour, creating its style if needed."""
        if self.style is None:
            self.style = Style()
        self.style.color = color
        return self


@dataclass
class Row:
    """A row of cells; strings are turned into plain cells."""

    cells: Iterable[Cell | Line | str] = field(default_factory=list)
    style: Style | None = None
    height: int = 1

    def __post_init__(self) -> None:
        self.cells = [c if isinstance(c, Cell) else Cell(c) for c in self.cells]


@dataclass
class TableState:
    """Selected row (or None) and scroll offset of a table."""

    selected: int | None = None
    offset: int = 0

    def select_next(self, length: int) -> None:
        if length <= 0:
            self.selected = None
            return
        self.selected = 0 if self.selected is None else min(self.selected + 1, length - 1)

    def select_previous(self, length: int) -> None:
        if length <= 0:
            self.selected = None
            return
        self.selected = 0 if self.selected is None else max(self.selected - 1, 0)

    def select(self, index: int | None) -> None:
        self.selected = index


_CONSTRAINT_ARITY = {"length": 1, "min": 1, "max": 1, "percentage": 1, "ratio": 2}


@dataclass(frozen=True)
class Constraint:
    """A column width rule; the default is a minimum of one cell."""

    kind: str = "min"
    values: tuple[int, ...] = (1,)

    def __post_init__(self) -> None:
        arity = _CONSTRAINT_ARITY.get(self.kind)
        if arity is None:
            raise ValueError(f"unknown constraint kind {self.kind!r}")
        if len(self.values) != arity:
            raise ValueError(f"{self.kind} constraint takes {arity} value(s)")
        for v in self.values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError("constraint values must be ints")
            if not 0 <= v <= 0xFFFF:
                raise ValueError(f"constraint value must be in 0..65535, got {v}")

    @classmethod
    def length(cls, value: int) -> Constraint:
        return cls("length", (value,))

    @classmethod
    def min(cls, value: int) -> Constraint:
        return cls("min", (value,))

    @classmethod
    def max(cls, value: int) -> Constraint:
        return cls("max", (value,))

    @classmethod
    def percentage(cls, value: int) -> Constraint:
        return cls("percentage", (value,))

    @classmethod
    def ratio(cls, numerator: int, denominator: int) -> Constraint:
        return cls("ratio", (numerator, denominator))


@dataclass
class Table:
    """A table of rows with an optional header row."""

    header: Row | None = None
    rows: Iterable[Row] = field(default_factory=list)
    widths: Iterable[Constraint] = field(default_factory=list)
    highlight_style: Style = field(default_factory=Style)
    highlight_symbol: str | None = None
    column_separator: str | None = " "
    key: str | None = None

    def __post_init__(self) -> None:
        self.rows = list(self.rows)
        self.widths = list(self.widths)

    def __len__(self) -> int:
        return len(self.rows)

    def render(self, state: TableState | None = None) -> Element:
        """Render the header and all rows, highlighting the selected row."""
        if state is None:
            state = TableState()
        separator = self.column_separator if self.column_separator is not None else " "
        symbol = self.highlight_symbol
        pad = " " * len(symbol.encode("utf-8")) if symbol is not None else ""

        container = Box().flex_direction(FlexDirection.COLUMN)
        if self.key is not None:
            container.key(self.key)
        if self.header is not None:
            container.child(self._render_row(self.header, separator, False, pad))
        for index, row in enumerate(self.rows):
            container.child(self._render_row(row, separator, state.selected == index, pad))
        return container.into_element()

    def _render_row(self, row: Row, separator: str, is_selected: bool, pad: str) -> Element:
        spans: list[Span] = []
        if self.highlight_symbol is not None:
            spans.append(Span(self.highlight_symbol if is_selected else pad))
        for i, cell in enumerate(row.cells):
            if i > 0:
                spans.append(Span(separator))
            spans.extend(copy.deepcopy(cell.content.spans))

        text = Text.from_line(Line(spans))
        if is_selected:
            style = self.highlight_style
            if style.color is not None:
                text.color(style.color)
            if style.background_color is not None:
                text.background(style.background_color)
            if style.bold:
                text.bold()
            if style.inverse:
                text.inverse()
        return text.into_element()

    def into_element(self) -> Element:
        """Render with nothing selected."""
        return self.render(TableState())