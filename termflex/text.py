"""Styled text: spans, lines and the Text component."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from wcwidth import wcwidth

from termflex.color import Color
from termflex.element import Element, ElementType
from termflex.style import Style, TextWrap

__all__ = ["Span", "Line", "Text"]


def _display_width(content: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in content)


def _split_lines(content: str) -> list[str]:
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


@dataclass
class Span:
    """A piece of text with its own style."""

    content: str = ""
    style: Style = field(default_factory=Style)

    def color(self, color: Color) -> Span:
        self.style.color = color
        return self

    def fg(self, color: Color) -> Span:
        return self.color(color)

    def background(self, color: Color) -> Span:
        self.style.background_color = color
        return self

    def bg(self, color: Color) -> Span:
        return self.background(color)

    def bold(self) -> Span:
        self.style.bold = True
        return self

    def italic(self) -> Span:
        self.style.italic = True
        return self

    def underline(self) -> Span:
        self.style.underline = True
        return self

    def strikethrough(self) -> Span:
        self.style.strikethrough = True
        return self

    def dim(self) -> Span:
        self.style.dim = True
        return self

    def inverse(self) -> Span:
        self.style.inverse = True
        return self

    def width(self) -> int:
        """Display width in terminal cells."""
        return _display_width(self.content)


@dataclass
class Line:
    """A line of text made of spans."""

    spans: list[Span] = field(default_factory=list)

    @classmethod
    def raw(cls, content: str) -> Line:
        return cls([Span(str(content))])

    def span(self, span: Span | str) -> Line:
        self.spans.append(span if isinstance(span, Span) else Span(str(span)))
        return self

    def width(self) -> int:
        return sum(s.width() for s in self.spans)

    def is_empty(self) -> bool:
        return all(not s.content for s in self.spans)


class Text:
    """Text component: one style for plain text, or lines of styled spans."""

    def __init__(self, content: str = "") -> None:
        lines = [Line.raw(part) for part in _split_lines(str(content))]
        self.lines: list[Line] = lines or [Line.raw("")]
        self.style = Style()
        self.key: str | None = None

    @classmethod
    def from_spans(cls, spans: list[Span]) -> Text:
        return cls.from_lines([Line(list(spans))])

    @classmethod
    def from_line(cls, line: Line) -> Text:
        return cls.from_lines([line])

    @classmethod
    def from_lines(cls, lines: list[Line]) -> Text:
        text = cls()
        text.lines = list(lines)
        return text

    def with_key(self, key: str) -> Text:
        self.key = str(key)
        return self

    def _all_spans(self):
        for line in self.lines:
            yield from line.spans

    def color(self, color: Color) -> Text:
        self.style.color = color
        for span in self._all_spans():
            if span.style.color is None:
                span.style.color = color
        return self

    def background(self, color: Color) -> Text:
        self.style.background_color = color
        for span in self._all_spans():
            if span.style.background_color is None:
                span.style.background_color = color
        return self

    def bg(self, color: Color) -> Text:
        return self.background(color)

    def _set_flag(self, name: str) -> Text:
        setattr(self.style, name, True)
        for span in self._all_spans():
            setattr(span.style, name, True)
        return self

    def bold(self) -> Text:
        return self._set_flag("bold")

    def italic(self) -> Text:
        return self._set_flag("italic")

    def underline(self) -> Text:
        return self._set_flag("underline")

    def strikethrough(self) -> Text:
        return self._set_flag("strikethrough")

    def dim(self) -> Text:
        return self._set_flag("dim")

    def inverse(self) -> Text:
        return self._set_flag("inverse")

    def wrap(self, wrap: TextWrap) -> Text:
        self.style.text_wrap = wrap
        return self

    def error(self) -> Text:
        return self.color(Color.RED)

    def success(self) -> Text:
        return self.color(Color.GREEN)

    def warning(self) -> Text:
        return self.color(Color.YELLOW)

    def info(self) -> Text:
        return self.color(Color.BLUE)

    def muted(self) -> Text:
        return self.dim()

    def into_element(self) -> Element:
        """Plain text for a single span, otherwise the lines of spans."""
        element = Element(ElementType.TEXT, style=copy.deepcopy(self.style), key=self.key)
        if len(self.lines) == 1 and len(self.lines[0].spans) == 1:
            span = self.lines[0].spans[0]
            element.text_content = span.content
            own = span.style
            if own.color is not None:
                element.style.color = own.color
            if own.background_color is not None:
                element.style.background_color = own.background_color
            for flag in ("bold", "italic", "underline", "strikethrough", "dim", "inverse"):
                if getattr(own, flag):
                    setattr(element.style, flag, True)
        else:
            element.spans = copy.deepcopy(self.lines)
        return element