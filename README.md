# termflex

Declarative building blocks for terminal user interfaces. You describe a UI
as a tree of `Element` objects, each carrying a flexbox-style `Style`, using
small chainable builders.

## Installation

```
pip install termflex
```

## Building a tree

```python
from termflex.box import Box
from termflex.text import Text, Span
from termflex.style import FlexDirection, BorderStyle
from termflex.color import Color
from termflex.spacer import Spacer

header = (
    Box()
    .flex_direction(FlexDirection.ROW)
    .border_style(BorderStyle.ROUND)
    .border_color(Color.CYAN)
    .padding(1)
    .child(Text("Left").success().into_element())
    .child(Spacer().into_element())
    .child(Text.from_spans([Span("Right ").bold(), Span("side").dim()]).into_element())
    .into_element()
)

print(len(header.children))  # 3
```

A `Text` holding a single span keeps its content in `element.text_content`
and copies the span's style onto the element. Text with several spans or
several lines keeps its lines in `element.spans`.

## Modules

- `termflex.element`: `Element` and `ElementType`. Every element gets a
  unique `id`; `Element.root()` has id 0 and `Element.copy()` gives the copy
  and its descendants fresh ids.
- `termflex.style`: `Style`, `Dimension`, `Edges`, `BorderStyle` (with
  `chars()` and `is_visible()`) and the layout enums `FlexDirection`,
  `AlignItems`, `AlignSelf`, `JustifyContent`, `Display`, `Position`,
  `Overflow`, `TextWrap`.
- `termflex.color`: `Color` with named colours (`Color.RED`,
  `Color.BRIGHT_WHITE`, ...), `Color.ansi256(code)`, `Color.rgb(r, g, b)` and
  `Color.hex(value)`.
- `termflex.box.Box`: flexbox container with padding, margin, gaps, sizes,
  borders, overflow, positioning and scroll offsets.
- `termflex.text`: `Text`, `Span`, `Line` for plain and rich text; widths are
  measured in terminal cells.
- `termflex.newline.Newline` and `termflex.spacer.Spacer`: layout helpers.
- `termflex.listview`: `List`, `ListItem`, `ListState`. The state moves the
  selection with `select_next`, `select_previous`, `select_first`,
  `select_last` and keeps it visible with `scroll_to_selected`.
- `termflex.table`: `Table`, `Row`, `Cell`, `TableState`, `Constraint`.
  Rows are joined with a column separator; the selected row takes the
  highlight style and symbol. Column `widths` are stored with the table but
  not applied when rendering.
- `termflex.progress`: `Progress` (with `Progress.from_ratio`), `Gauge` and
  `ProgressSymbols` (`block`, `line`, `dot`, `ascii`, `thin`).
- `termflex.sparkline.Sparkline`: inline graph from block characters; data
  longer than `width` is averaged into buckets (`sample`).
- `termflex.scrollbar`: `Scrollbar` (with `Scrollbar.horizontal` and
  `Scrollbar.from_sizes`), `ScrollbarSymbols`, `ScrollbarOrientation`.
- `termflex.scrollable`: `ScrollableBox`, a column that clips vertical
  overflow; `virtual_scroll_view`, which renders only the items inside the
  viewport; and `fixed_bottom_layout`, a full-height column with a growing
  content area above a fixed bottom part.
- `termflex.transform.Transform`: applies a function (`uppercase`,
  `lowercase`, `capitalize` or your own) to the plain text of each child.

## Selection example

```python
from termflex.listview import List, ListState

items = List(["Apples", "Pears", "Plums"], highlight_symbol="> ")
state = ListState()
state.select_next(len(items))
state.select_next(len(items))   # state.selected == 1
tree = items.render(state, None)
```

## Colours

```python
from termflex.color import Color

Color.hex("#ff0000") == Color.rgb(255, 0, 0)   # True
Color.hex("abc")                               # wrong length: Color.RESET
Color.ansi256(196)
```

## What it does not do

termflex only builds element trees. It does not compute a layout, draw
anything to the terminal, read keyboard input or run an event loop; a
renderer that walks the tree is up to you. `ScrollableBox.scrollbar(True)`
records the setting but does not add a scrollbar to the tree.

## Running the tests

```
pip install termflex[test]
pytest
```