"""Layout and text style properties of elements."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from termflex.color import Color

__all__ = [
    "FlexDirection",
    "AlignItems",
    "AlignSelf",
    "JustifyContent",
    "Display",
    "Position",
    "Overflow",
    "TextWrap",
    "BorderStyle",
    "Dimension",
    "Edges",
    "Style",
]


class FlexDirection(Enum):
    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row-reverse"
    COLUMN_REVERSE = "column-reverse"


class AlignItems(Enum):
    STRETCH = "stretch"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"


class AlignSelf(Enum):
    AUTO = "auto"
    STRETCH = "stretch"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"


class JustifyContent(Enum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class Display(Enum):
    FLEX = "flex"
    NONE = "none"


class Position(Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class Overflow(Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    SCROLL = "scroll"


class TextWrap(Enum):
    WRAP = "wrap"
    TRUNCATE = "truncate"
    TRUNCATE_START = "truncate-start"
    TRUNCATE_MIDDLE = "truncate-middle"
    TRUNCATE_END = "truncate-end"


class BorderStyle(Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    ROUND = "round"
    BOLD = "bold"
    SINGLE_DOUBLE = "single-double"
    DOUBLE_SINGLE = "double-single"
    CLASSIC = "classic"

    def chars(self) -> tuple[str, str, str, str, str, str]:
        """Border glyphs: top-left, top-right, bottom-left, bottom-right,
        horizontal, vertical."""
        return _BORDER_CHARS[self]

    def is_visible(self) -> bool:
        return self is not BorderStyle.NONE


_BORDER_CHARS = {
    BorderStyle.NONE: (" ", " ", " ", " ", " ", " "),
    BorderStyle.SINGLE: ("┌", "┐", "└", "┘", "─", "│"),
    BorderStyle.DOUBLE: ("╔", "╗", "╚", "╝", "═", "║"),
    BorderStyle.ROUND: ("╭", "╮", "╰", "╯", "─", "│"),
    BorderStyle.BOLD: ("┏", "┓", "┗", "┛", "━", "┃"),
    BorderStyle.SINGLE_DOUBLE: ("╓", "╖", "╙", "╜", "─", "║"),
    BorderStyle.DOUBLE_SINGLE: ("╒", "╕", "╘", "╛", "═", "│"),
    BorderStyle.CLASSIC: ("+", "+", "+", "+", "-", "|"),
}


def _number(value: object, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{what} must be a number, not {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class Dimension:
    """A size: automatic, a number of cells, or a percentage of the parent."""

    kind: str = "auto"
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in ("auto", "points", "percent"):
            raise ValueError(f"unknown dimension kind {self.kind!r}")

    @classmethod
    def auto(cls) -> Dimension:
        return cls("auto")

    @classmethod
    def points(cls, value: float) -> Dimension:
        return cls("points", _number(value, "points"))

    @classmethod
    def percent(cls, value: float) -> Dimension:
        return cls("percent", _number(value, "percent"))

    @classmethod
    def of(cls, value: Dimension | int | float) -> Dimension:
        """Accept a Dimension as is; a plain number means cells."""
        if isinstance(value, Dimension):
            return value
        return cls.points(value)


@dataclass
class Edges:
    """Per-side amounts for padding and margin."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def all(cls, value: float) -> Edges:
        v = _number(value, "edge")
        return cls(v, v, v, v)

    @classmethod
    def horizontal(cls, value: float) -> Edges:
        v = _number(value, "edge")
        return cls(0.0, v, 0.0, v)

    @classmethod
    def vertical(cls, value: float) -> Edges:
        v = _number(value, "edge")
        return cls(v, 0.0, v, 0.0)

    @classmethod
    def of(cls, value: Edges | int | float) -> Edges:
        """Copy an Edges, or spread a plain number over all four sides."""
        if isinstance(value, Edges):
            return replace(value)
        return cls.all(value)


_SIDES = ("top", "right", "bottom", "left")


@dataclass
class Style:
    """Every style property an element can carry."""

    display: Display = Display.FLEX

    position: Position = Position.RELATIVE
    top: float | None = None
    right: float | None = None
    bottom: float | None = None
    left: float | None = None

    flex_direction: FlexDirection = FlexDirection.ROW
    flex_wrap: bool = False
    flex_grow: float = 0.0
    flex_shrink: float = 1.0
    flex_basis: Dimension = field(default_factory=Dimension.auto)
    align_items: AlignItems = AlignItems.STRETCH
    align_self: AlignSelf = AlignSelf.AUTO
    justify_content: JustifyContent = JustifyContent.FLEX_START

    padding: Edges = field(default_factory=Edges)
    margin: Edges = field(default_factory=Edges)
    gap: float = 0.0
    row_gap: float | None = None
    column_gap: float | None = None

    width: Dimension = field(default_factory=Dimension.auto)
    height: Dimension = field(default_factory=Dimension.auto)
    min_width: Dimension = field(default_factory=Dimension.auto)
    min_height: Dimension = field(default_factory=Dimension.auto)
    max_width: Dimension = field(default_factory=Dimension.auto)
    max_height: Dimension = field(default_factory=Dimension.auto)

    border_style: BorderStyle = BorderStyle.NONE
    border_color: Color | None = None
    border_top_color: Color | None = None
    border_right_color: Color | None = None
    border_bottom_color: Color | None = None
    border_left_color: Color | None = None
    border_dim: bool = False
    border_top: bool = True
    border_bottom: bool = True
    border_left: bool = True
    border_right: bool = True

    color: Color | None = None
    background_color: Color | None = None

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    dim: bool = False
    inverse: bool = False
    text_wrap: TextWrap = TextWrap.WRAP

    overflow_x: Overflow = Overflow.VISIBLE
    overflow_y: Overflow = Overflow.VISIBLE

    is_static: bool = False

    def has_border(self) -> bool:
        """True when a visible border style is set on at least one side."""
        return self.border_style.is_visible() and (
            self.border_top or self.border_bottom or self.border_left or self.border_right
        )

    def resolved_border_color(self, side: str) -> Color | None:
        """The colour of one border side, falling back to ``border_color``."""
        if side not in _SIDES:
            raise ValueError(f"side must be one of {', '.join(_SIDES)}; got {side!r}")
        own = getattr(self, f"border_{side}_color")
        return own if own is not None else self.border_color