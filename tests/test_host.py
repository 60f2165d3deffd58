import pytest

from newsfit.document.host import DocumentHost
from newsfit.document.nodes import AUTO_RESIZE_HEIGHT, AUTO_RESIZE_NONE, TextNode
from newsfit.errors import MeasurementError


def column(text: str = "", height: float = 48.0) -> TextNode:
    # font 10 -> 5px glyphs -> 20 chars per line at width 100; line height 12
    return TextNode(name="Title", characters=text, x=0, width=100, height=height, font_size=10, line_height=12)


def test_text_height_wraps_words():
    host = DocumentHost()
    node = column("aaaa bbbb cccc dddd eeee ffff")  # 29 chars -> 2 lines
    assert host.text_height(node) == 24


def test_text_height_counts_blank_lines():
    host = DocumentHost()
    assert host.text_height(column("one\n\ntwo")) == 36


def test_empty_text_has_no_height():
    assert DocumentHost().text_height(column("")) == 0


def test_measure_overflow_positive_when_text_too_long():
    host = DocumentHost()
    node = column("word " * 40, height=48.0)  # 200 chars -> 10 lines -> 120px
    assert host.measure_overflow(node) == pytest.approx(72.0)


def test_measure_overflow_negative_with_spare_room():
    host = DocumentHost()
    node = column("short", height=48.0)
    assert host.measure_overflow(node) == pytest.approx(-36.0)


def test_measure_restores_sizing_mode_and_height():
    host = DocumentHost()
    node = column("word " * 40, height=48.0)
    host.measure_overflow(node)

    assert node.auto_resize == AUTO_RESIZE_NONE
    assert node.height == 48.0


def test_sizing_override_restores_on_error():
    host = DocumentHost()
    node = column("text", height=48.0)

    with pytest.raises(RuntimeError):
        with host.sizing_override(node):
            assert node.auto_resize == AUTO_RESIZE_HEIGHT
            assert node.height == 12
            raise RuntimeError("measurement blew up")

    assert node.auto_resize == AUTO_RESIZE_NONE
    assert node.height == 48.0


def test_missing_font_raises_measurement_error():
    host = DocumentHost(available_fonts={"Inter Regular"})
    node = column("text")
    node.fonts = ["Times Bold"]

    with pytest.raises(MeasurementError, match="Times Bold"):
        host.set_text(node, "new text")
    assert node.characters == "text"


def test_set_text_loads_fonts_first():
    host = DocumentHost(available_fonts={"Inter Regular"})
    node = column()
    host.set_text(node, "hello")

    assert node.characters == "hello"
    assert host.loaded_fonts == {"Inter Regular"}
