"""Tests for boxgrid.cell.Cell -- content, geometry, alignment and styles."""

from __future__ import annotations

from boxgrid.cell import Cell
from boxgrid.style import BackgroundColor, Bold, Color, ForegroundColor, Italic, Underline
from boxgrid.terminal import StringSink
from boxgrid.utils import display_width

from .recording_terminal import RecordingTerminal


def _render(cell: Cell, idx: int, width: int, skip_right_fill: bool = False) -> str:
    sink = StringSink()
    cell.print(sink, idx, width, skip_right_fill)
    return sink.getvalue()


# ---------------------------------------------------------------------------
# Content and geometry
# ---------------------------------------------------------------------------


class TestCellContent:
    """Text splitting, width and height."""

    def test_get_content(self) -> None:
        assert Cell("test").get_content() == "test"

    def test_str_matches_content(self) -> None:
        assert str(Cell("a\nb")) == "a\nb"

    def test_empty_cell_has_height_one(self) -> None:
        cell = Cell("")
        assert cell.get_height() == 1
        assert cell.get_width() == 0

    def test_default_cell_is_empty(self) -> None:
        assert Cell().get_content() == ""

    def test_multi_line_height_and_width(self) -> None:
        cell = Cell("A\nBCCZZZ\nDDD")
        assert cell.get_height() == 3
        assert cell.get_width() == 6

    def test_crlf_lines(self) -> None:
        cell = Cell("ab\r\ncdef")
        assert cell.lines() == ["ab", "cdef"]
        assert cell.get_width() == 4

    def test_form_feed_does_not_split(self) -> None:
        cell = Cell("a\x0cb")
        assert cell.get_height() == 1
        assert cell.get_content() == "a\x0cb"

    def test_width_counts_wide_glyphs_twice(self) -> None:
        cell = Cell("由系统自动更新")
        assert cell.get_width() == 14

    def test_width_of_mixed_text_is_sum_of_glyph_widths(self) -> None:
        cell = Cell("ab世界")
        assert cell.get_width() == 1 + 1 + 2 + 2

    def test_from_value_uses_str(self) -> None:
        assert Cell.from_value(42).get_content() == "42"

    def test_from_value_passes_cells_through(self) -> None:
        cell = Cell("x")
        assert Cell.from_value(cell) is cell


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestCellPrint:
    """Printing one line of a cell within a column width."""

    def test_print_ascii(self) -> None:
        cell = Cell("hello")
        assert cell.get_width() == 5
        assert _render(cell, 0, 10) == "hello     "

    def test_print_unicode(self) -> None:
        cell = Cell("привет")
        assert cell.get_width() == 6
        assert _render(cell, 0, 10) == "привет    "

    def test_print_cjk(self) -> None:
        cell = Cell("由系统自动更新")
        assert _render(cell, 0, 20) == "由系统自动更新      "

    def test_align_left(self) -> None:
        assert _render(Cell("test", "left"), 0, 10) == "test      "

    def test_align_center(self) -> None:
        assert _render(Cell("test", "center"), 0, 10) == "   test   "

    def test_align_center_odd_fill_goes_right(self) -> None:
        assert _render(Cell("test", "center"), 0, 9) == "  test   "

    def test_align_right(self) -> None:
        assert _render(Cell("test", "right"), 0, 10) == "      test"

    def test_line_past_height_is_blank(self) -> None:
        assert _render(Cell("ab"), 3, 4) == "    "

    def test_skip_right_fill(self) -> None:
        assert _render(Cell("ab"), 0, 6, skip_right_fill=True) == "ab"

    def test_skip_right_fill_keeps_left_fill(self) -> None:
        assert _render(Cell("ab", "right"), 0, 6, skip_right_fill=True) == "    ab"

    def test_content_wider_than_column_is_not_truncated(self) -> None:
        assert _render(Cell("abcdef"), 0, 3) == "abcdef"

    def test_rendered_width_matches_column_width(self) -> None:
        for text in ("", "a", "世界", "привет", "a\nlonger line"):
            cell = Cell(text, "center")
            width = cell.get_width() + 3
            for idx in range(cell.get_height()):
                assert display_width(_render(cell, idx, width)) == width

    def test_second_line(self) -> None:
        assert _render(Cell("a\nbcd", "right"), 1, 5) == "  bcd"


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


class TestCellStyle:
    """Style attributes and the style-spec syntax."""

    def test_style_spec(self) -> None:
        cell = Cell("test").style_spec("FrBBbuic")
        style = cell.get_style()
        assert len(style) == 5
        assert Underline() in style
        assert Italic() in style
        assert Bold() in style
        assert ForegroundColor(Color.RED) in style
        assert BackgroundColor(Color.BRIGHT_BLUE) in style
        assert cell.get_align() == "center"

    def test_style_spec_replaces_previous_style(self) -> None:
        cell = Cell("test").style_spec("FrBBbuic")
        cell.style_spec("FDBwr")
        style = cell.get_style()
        assert style == [
            ForegroundColor(Color.BRIGHT_BLACK),
            BackgroundColor(Color.WHITE),
        ]
        assert cell.get_align() == "right"

    def test_style_spec_ignores_invalid_tokens(self) -> None:
        cell = Cell("test").style_spec("FzBr")
        assert cell.get_style() == [BackgroundColor(Color.RED)]

    def test_style_spec_only_invalid_tokens(self) -> None:
        cell = Cell("test").style_spec("FrB").style_spec("zzz")
        assert cell.get_style() == []
        assert cell.get_align() == "left"

    def test_style_does_not_change_width(self) -> None:
        cell = Cell("abc").style_spec("bFg")
        assert cell.get_width() == 3
        assert cell.get_height() == 1

    def test_reset_style(self) -> None:
        cell = (
            Cell("test")
            .with_style(ForegroundColor(Color.BRIGHT_BLACK))
            .with_style(BackgroundColor(Color.WHITE))
        )
        cell.align("right")
        assert len(cell.get_style()) == 2
        cell.reset_style()
        assert cell.get_style() == []
        assert cell.get_align() == "left"

    def test_equality_includes_style(self) -> None:
        assert Cell("a") == Cell("a")
        assert Cell("a") != Cell("a").with_style(Bold())
        assert Cell("a") != Cell("a", "right")


class TestCellPrintTerm:
    """Printing to a styled sink."""

    def test_applies_style_then_resets(self) -> None:
        term = RecordingTerminal()
        cell = Cell("hi").with_style(Bold())
        cell.print_term(term, 0, 4)
        assert term.output == "<Bold>hi  <reset>"

    def test_unstyled_cell_still_resets(self) -> None:
        term = RecordingTerminal()
        Cell("hi").print_term(term, 0, 2)
        assert term.output == "hi<reset>"
        assert term.reset_count == 1

    def test_unsupported_attribute_is_skipped(self) -> None:
        term = RecordingTerminal(unsupported=(Italic(),))
        cell = Cell("x").with_style(Italic()).with_style(Bold())
        cell.print_term(term, 0, 1)
        assert term.attrs == [Bold()]
        assert term.text == "x"

    def test_markup_like_text_is_kept(self) -> None:
        term = RecordingTerminal()
        Cell("<b>").with_style(Bold()).print_term(term, 0, 3)
        assert term.text == "<b>"
        assert term.events == [("attr", "Bold"), ("text", "<b>"), ("reset", "")]
