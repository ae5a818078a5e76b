"""Declarative, flexbox-style building blocks for terminal user interfaces."""

__version__ = "0.6.3"

__all__ = [
    "box",
    "color",
    "element",
    "listview",
    "newline",
    "progress",
    "scrollable",
    "scrollbar",
    "spacer",
    "sparkline",
    "style",
    "table",
    "text",
    "transform",
]