import pytest

from termflex.color import Color
from termflex.listview import List, ListItem, ListState
from termflex.style import FlexDirection, Style
from termflex.text import Line, Span


def _line_contents(element):
    return [span.content for span in element.spans[0].spans]


def test_list_item_creation():
    item = ListItem("Test item")
    assert item.content.spans[0].content == "Test item"


def test_list_item_from_spans():
    item = ListItem.from_spans([Span("a"), Span("b")])
    assert [s.content for s in item.content.spans] == ["a", "b"]


def test_list_item_from_line():
    line = Line.raw("x")
    assert ListItem(line).content is line


def test_list_creation():
    assert len(List(["Item 1", "Item 2", "Item 3"])) == 3


def test_list_state_navigation():
    state = ListState()
    state.select_next(5)
    assert state.selected == 0
    state.select_next(5)
    assert state.selected == 1
    state.select_previous(5)
    assert state.selected == 0
    state.select_previous(5)
    assert state.selected == 0


def test_list_state_next_stops_at_end():
    state = ListState(selected=4)
    state.select_next(5)
    assert state.selected == 4


def test_list_state_empty_clears_selection():
    state = ListState(selected=2)
    state.select_next(0)
    assert state.selected is None
    state.selected = 2
    state.select_previous(0)
    assert state.selected is None


def test_list_state_first_last():
    state = ListState()
    state.select_last(10)
    assert state.selected == 9
    state.select_first(10)
    assert state.selected == 0


def test_first_last_on_empty_keep_selection():
    state = ListState(selected=3)
    state.select_first(0)
    state.select_last(0)
    assert state.selected == 3


def test_select():
    state = ListState()
    state.select(7)
    assert state.selected == 7
    state.select(None)
    assert state.selected is None


def test_scroll_to_selected():
    state = ListState(selected=15)
    state.scroll_to_selected(10)
    assert state.offset == 6


def test_scroll_to_selected_scrolls_up():
    state = ListState(selected=2, offset=5)
    state.scroll_to_selected(10)
    assert state.offset == 2


def test_scroll_to_selected_inside_viewport_unchanged():
    state = ListState(selected=7, offset=5)
    state.scroll_to_selected(10)
    assert state.offset == 5


def test_scroll_to_selected_zero_height_raises():
    state = ListState(selected=3)
    with pytest.raises(ValueError):
        state.scroll_to_selected(0)


def test_into_element_plain():
    element = List(["a", "b"]).into_element()
    assert element.style.flex_direction == FlexDirection.COLUMN
    assert [c.text_content for c in element.children] == ["a", "b"]


def test_render_with_symbol_and_highlight():
    lst = List(
        ["a", "b", "c"],
        highlight_symbol="> ",
        highlight_style=Style(color=Color.RED, bold=True),
    )
    element = lst.render(ListState(selected=1))
    assert len(element.children) == 3
    assert _line_contents(element.children[0]) == ["  ", "a"]
    assert _line_contents(element.children[1]) == ["> ", "b"]
    selected = element.children[1]
    assert selected.style.color == Color.RED
    assert selected.style.bold
    assert all(s.style.color == Color.RED for s in selected.spans[0].spans)
    assert element.children[0].style.color is None


def test_symbol_padding_uses_encoded_length():
    element = List(["a"], highlight_symbol="▶ ").render(ListState())
    assert _line_contents(element.children[0])[0] == " " * 4


def test_render_viewport():
    state = ListState(offset=2)
    element = List(["a", "b", "c", "d", "e"]).render(state, 2)
    assert [c.text_content for c in element.children] == ["c", "d"]


def test_render_key():
    element = List(["a"], key="menu").into_element()
    assert element.key == "menu"


def test_item_style_color_applied_and_item_unchanged():
    item = ListItem("x", style=Style(color=Color.BLUE))
    element = List([item]).render(ListState())
    assert element.children[0].style.color == Color.BLUE
    assert item.content.spans[0].style.color is None


def test_show_selection_disabled():
    lst = List(["a", "b"], highlight_style=Style(color=Color.RED), show_selection=False)
    element = lst.render(ListState(selected=0))
    assert element.children[0].style.color is None