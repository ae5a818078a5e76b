import pytest

from termflex.color import Color
from termflex.scrollbar import Scrollbar, ScrollbarOrientation, ScrollbarSymbols
from termflex.style import FlexDirection


def _glyphs(element):
    return "".join(child.text_content for child in element.children)


def test_scrollbar_creation():
    scrollbar = Scrollbar(position=0.5, length=10)
    assert scrollbar.length == 10
    assert scrollbar.position == pytest.approx(0.5)


def test_scrollbar_from_sizes():
    scrollbar = Scrollbar.from_sizes(100, 20, 40, length=10)
    assert abs(scrollbar.position - 0.5) < 0.01
    assert abs(scrollbar.viewport_ratio - 0.2) < 0.01
    assert scrollbar.length == 10


def test_scrollbar_from_sizes_content_fits():
    scrollbar = Scrollbar.from_sizes(10, 20, 5)
    assert scrollbar.position == 0.0
    assert scrollbar.viewport_ratio == 1.0


def test_scrollbar_symbols():
    assert ScrollbarSymbols.vertical().track == "│"
    assert ScrollbarSymbols.horizontal().track == "─"
    assert ScrollbarSymbols.block().track == "░"
    assert ScrollbarSymbols.line().thumb == "┃"
    assert ScrollbarSymbols.double().begin == "╦"


def test_scrollbar_orientation():
    assert Scrollbar().orientation is ScrollbarOrientation.VERTICAL
    horizontal = Scrollbar.horizontal()
    assert horizontal.orientation is ScrollbarOrientation.HORIZONTAL
    assert horizontal.symbols == ScrollbarSymbols.horizontal()


def test_orientation_picks_matching_symbols():
    bar = Scrollbar(orientation=ScrollbarOrientation.HORIZONTAL)
    assert bar.symbols.begin == "◄"


def test_position_and_ratio_are_clamped():
    bar = Scrollbar(position=3.0, viewport_ratio=-1.0)
    assert bar.position == 1.0
    assert bar.viewport_ratio == 0.0


def test_vertical_render_default():
    element = Scrollbar().into_element()
    assert element.style.flex_direction is FlexDirection.COLUMN
    assert _glyphs(element) == "▲████││││▼"


def test_vertical_render_at_end():
    element = Scrollbar(position=1.0).into_element()
    assert _glyphs(element) == "▲││││████▼"


def test_vertical_render_colors():
    element = Scrollbar(
        symbols=ScrollbarSymbols.block(),
        length=4,
        viewport_ratio=0.25,
        thumb_color=Color.RED,
        track_color=Color.BLUE,
        key="sb",
    ).into_element()
    assert element.key == "sb"
    assert _glyphs(element) == "█░░░"
    assert [c.style.color for c in element.children] == [
        Color.RED,
        Color.BLUE,
        Color.BLUE,
        Color.BLUE,
    ]


def test_thumb_is_at_least_one_cell():
    element = Scrollbar(symbols=ScrollbarSymbols.block(), length=5, viewport_ratio=0.0).into_element()
    assert _glyphs(element) == "█░░░░"


def test_horizontal_render_single_line():
    element = Scrollbar.horizontal(length=6, position=0.0, thumb_color=Color.GREEN).into_element()
    assert len(element.children) == 1
    text = element.children[0]
    assert text.text_content == "◄██──►"
    assert text.style.color == Color.GREEN


def test_too_short_renders_empty_box():
    element = Scrollbar(length=2).into_element()
    assert element.children == []
    assert element.is_box()


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        Scrollbar(length=-1)