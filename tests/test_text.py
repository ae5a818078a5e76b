from termflex.color import Color
from termflex.element import ElementType
from termflex.style import TextWrap
from termflex.text import Line, Span, Text


def test_text_creation():
    element = Text("Hello").into_element()
    assert element.text_content == "Hello"
    assert element.element_type is ElementType.TEXT


def test_text_styles():
    element = Text("Styled").color(Color.GREEN).bold().underline().into_element()
    assert element.style.color == Color.GREEN
    assert element.style.bold
    assert element.style.underline


def test_text_convenience_methods():
    assert Text("Error").error().into_element().style.color == Color.RED
    assert Text("Success").success().into_element().style.color == Color.GREEN
    assert Text("Warn").warning().into_element().style.color == Color.YELLOW
    assert Text("Info").info().into_element().style.color == Color.BLUE
    assert Text("Muted").muted().into_element().style.dim


def test_span_creation():
    span = Span("Hello").color(Color.GREEN).bold()
    assert span.content == "Hello"
    assert span.style.color == Color.GREEN
    assert span.style.bold


def test_text_with_spans():
    text = Text.from_spans(
        [Span("Hello ").color(Color.WHITE), Span("World").color(Color.GREEN).bold()]
    )
    assert len(text.lines) == 1
    assert len(text.lines[0].spans) == 2
    assert text.lines[0].spans[0].content == "Hello "
    assert text.lines[0].spans[1].content == "World"


def test_text_spans_element():
    element = Text.from_spans(
        [Span("Hello ").color(Color.WHITE), Span("World").color(Color.GREEN)]
    ).into_element()
    assert element.text_content is None
    assert len(element.spans) == 1
    assert len(element.spans[0].spans) == 2


def test_line_creation():
    line = (
        Line()
        .span(Span("Part 1").color(Color.RED))
        .span(Span(" - "))
        .span(Span("Part 2").color(Color.BLUE))
    )
    assert len(line.spans) == 3
    assert line.width() == 15


def test_multiline_text():
    text = Text.from_lines([Line([Span("Line 1").bold()]), Line([Span("Line 2").italic()])])
    assert len(text.lines) == 2


def test_wide_characters_width():
    assert Span("日本").width() == 4
    assert Line.raw("ab日").width() == 4


def test_line_is_empty():
    assert Line().is_empty()
    assert Line.raw("").is_empty()
    assert not Line.raw("x").is_empty()


def test_text_splits_lines():
    text = Text("a\r\nb\n")
    assert [line.spans[0].content for line in text.lines] == ["a", "b"]
    element = text.into_element()
    assert [l.spans[0].content for l in element.spans] == ["a", "b"]


def test_empty_text_has_one_empty_line():
    assert Text("").into_element().text_content == ""


def test_color_keeps_existing_span_color():
    text = Text.from_spans([Span("a").color(Color.RED), Span("b")]).color(Color.BLUE)
    assert text.lines[0].spans[0].style.color == Color.RED
    assert text.lines[0].spans[1].style.color == Color.BLUE


def test_background_and_key_and_wrap():
    element = (
        Text("x").bg(Color.CYAN).with_key("k").wrap(TextWrap.TRUNCATE).into_element()
    )
    assert element.style.background_color == Color.CYAN
    assert element.key == "k"
    assert element.style.text_wrap is TextWrap.TRUNCATE


def test_from_line_single_span_is_simple():
    element = Text.from_line(Line([Span("hi").italic().inverse()])).into_element()
    assert element.text_content == "hi"
    assert element.style.italic
    assert element.style.inverse
    assert element.spans is None