"""Transform component: rewrites the text of its child elements."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from termflex.element import Element, ElementType
from termflex.style import Style

__all__ = ["Transform"]


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


class Transform:
    """Applies ``transform`` to the plain text of each child element."""

    def __init__(
        self,
        transform: Callable[[str], str] | None = None,
        children: Iterable[Element] = (),
    ) -> None:
        self.transform = transform
        self._children: list[Element] = list(children)

    def child(self, element: Element) -> Transform:
        self._children.append(element)
        return self

    def children(self, elements: Iterable[Element]) -> Transform:
        self._children.extend(elements)
        return self

    @classmethod
    def uppercase(cls) -> Transform:
        return cls(str.upper)

    @classmethod
    def lowercase(cls) -> Transform:
        return cls(str.lower)

    @classmethod
    def capitalize(cls) -> Transform:
        """Upper-case the first character and leave the rest as it is."""
        return cls(_capitalize)

    def into_element(self) -> Element:
        """A box holding the children, their plain text transformed."""
        element = Element(ElementType.BOX, style=Style())
        for child in self._children:
            if self.transform is not None and child.text_content is not None:
                child.text_content = self.transform(child.text_content)
            element.add_child(child)
        return element