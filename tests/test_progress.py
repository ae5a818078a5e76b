import pytest

from termflex.color import Color
from termflex.progress import Gauge, Progress, ProgressSymbols


def _spans(element):
    return element.children[0].spans[0].spans


def test_progress_creation():
    progress = Progress(progress=0.5, width=20)
    assert progress.width == 20
    assert abs(progress.progress - 0.5) < 0.01


def test_progress_ratio():
    progress = Progress.from_ratio(50, 100)
    assert abs(progress.progress - 0.5) < 0.01


def test_progress_ratio_zero_total():
    assert Progress.from_ratio(5, 0).progress == 0.0


def test_progress_clamped():
    assert Progress(progress=1.5).progress == 1.0
    assert Progress(progress=-2).progress == 0.0
    assert Progress.from_ratio(300, 100).progress == 1.0


def test_progress_symbols():
    assert ProgressSymbols.block().filled == "█"
    assert ProgressSymbols.ascii().filled == "#"
    assert ProgressSymbols.line().head == "╸"
    assert ProgressSymbols.dot().bracket_left == "⟨"
    assert ProgressSymbols.thin().empty == " "


def test_gauge_creation():
    gauge = Gauge(progress=0.75, label="CPU")
    assert abs(gauge.progress - 0.75) < 0.01
    assert gauge.label == "CPU"


def test_progress_render_block():
    element = Progress(progress=0.5, width=12, key="p").into_element()
    assert element.key == "p"
    spans = _spans(element)
    assert [s.content for s in spans] == ["[", "█████", "░░░░░", "]"]
    assert spans[2].style.dim


def test_progress_render_with_head_and_percent():
    element = Progress(
        progress=0.5, width=12, symbols=ProgressSymbols.ascii(), show_percent=True, label="done"
    ).into_element()
    spans = _spans(element)
    assert [s.content for s in spans] == ["[", "####", ">", "-----", "]", "  50%", " done"]


def test_progress_full_has_no_head_or_empty():
    element = Progress(progress=1.0, width=12, symbols=ProgressSymbols.ascii()).into_element()
    assert [s.content for s in _spans(element)] == ["[", "##########", "]"]


def test_progress_colors():
    element = Progress(
        progress=0.5, width=6, filled_color=Color.GREEN, empty_color=Color.RED
    ).into_element()
    spans = _spans(element)
    assert spans[1].style.color == Color.GREEN
    assert spans[2].style.color == Color.RED
    assert not spans[2].style.dim


def test_progress_negative_width_rejected():
    with pytest.raises(ValueError):
        Progress(width=-1)


def test_gauge_render():
    element = Gauge(progress=0.75, label="CPU", color=Color.CYAN).into_element()
    spans = _spans(element)
    assert [s.content for s in spans] == ["████████", "░░", "  75%", " CPU"]
    assert spans[0].style.color == Color.CYAN
    assert spans[2].style.bold and spans[2].style.color == Color.CYAN


def test_gauge_empty():
    spans = _spans(Gauge().into_element())
    assert [s.content for s in spans] == ["", "░" * 10, "   0%"]