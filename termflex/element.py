"""Elements: the nodes of the UI tree."""

from __future__ import annotations

import copy
import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from termflex.style import Style

if TYPE_CHECKING:
    from termflex.text import Line

__all__ = ["ElementType", "Element"]

_ids = itertools.count(1)


def _next_id() -> int:
    return next(_ids)


class ElementType(Enum):
    ROOT = "root"
    BOX = "box"
    TEXT = "text"
    VIRTUAL_TEXT = "virtual-text"


@dataclass(eq=False)
class Element:
    """A node of the UI tree.

    Every element gets a fresh unique ``id``; the root element has id 0.
    """

    element_type: ElementType = ElementType.BOX
    style: Style = field(default_factory=Style)
    children: list[Element] = field(default_factory=list)
    text_content: str | None = None
    spans: list[Line] | None = None
    key: str | None = None
    scroll_offset_x: int | None = None
    scroll_offset_y: int | None = None
    id: int = field(default_factory=_next_id)

    @classmethod
    def root(cls) -> Element:
        return cls(ElementType.ROOT, id=0)

    @classmethod
    def box(cls) -> Element:
        return cls(ElementType.BOX)

    @classmethod
    def text(cls, content: str) -> Element:
        return cls(ElementType.TEXT, text_content=str(content))

    def with_key(self, key: str) -> Element:
        self.key = str(key)
        return self

    def add_child(self, child: Element) -> None:
        self.children.append(child)

    def is_text(self) -> bool:
        return self.element_type in (ElementType.TEXT, ElementType.VIRTUAL_TEXT)

    def is_box(self) -> bool:
        return self.element_type is ElementType.BOX

    def is_root(self) -> bool:
        return self.element_type is ElementType.ROOT

    def copy(self) -> Element:
        """A deep copy in which this element and every descendant get new ids."""
        return Element(
            self.element_type,
            style=copy.deepcopy(self.style),
            children=[child.copy() for child in self.children],
            text_content=self.text_content,
            spans=copy.deepcopy(self.spans),
            key=self.key,
            scroll_offset_x=self.scroll_offset_x,
            scroll_offset_y=self.scroll_offset_y,
        )