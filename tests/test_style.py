"""Tests for boxgrid.style -- style-spec parsing and attribute mappings."""

from __future__ import annotations

import logging

import pytest

from boxgrid.style import (
    BackgroundColor,
    Bold,
    Color,
    ForegroundColor,
    Italic,
    Underline,
    color_to_hex,
    css_declaration,
    parse_style_spec,
    sgr_params,
)


class TestParseStyleSpec:
    """The single-character style mini-language."""

    def test_empty_spec(self) -> None:
        parsed = parse_style_spec("")
        assert parsed.attrs == []
        assert parsed.align is None

    def test_colours_and_attributes(self) -> None:
        parsed = parse_style_spec("FrBybl")
        assert parsed.attrs == [
            ForegroundColor(Color.RED),
            BackgroundColor(Color.YELLOW),
            Bold(),
        ]
        assert parsed.align == "left"

    def test_uppercase_colour_is_bright(self) -> None:
        parsed = parse_style_spec("FG")
        assert parsed.attrs == [ForegroundColor(Color.BRIGHT_GREEN)]

    def test_d_means_black_after_colour_prefix(self) -> None:
        assert parse_style_spec("Fd").attrs == [ForegroundColor(Color.BLACK)]

    def test_standalone_d_is_a_no_op(self) -> None:
        parsed = parse_style_spec("d")
        assert parsed.attrs == []
        assert parsed.align is None

    def test_last_alignment_wins(self) -> None:
        assert parse_style_spec("lcr").align == "right"

    def test_unknown_colour_cancels_pending_state(self) -> None:
        # "z" is not a colour; the following "b" is then read as bold.
        parsed = parse_style_spec("Fzb")
        assert parsed.attrs == [Bold()]

    def test_trailing_colour_prefix_is_dropped(self) -> None:
        assert parse_style_spec("bF").attrs == [Bold()]

    def test_unknown_tokens_are_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="boxgrid.style"):
            parse_style_spec("xb")
        assert any("Ignoring unknown token" in r.message for r in caplog.records)


class TestSgrParams:
    """Attribute to ANSI SGR parameter mapping."""

    def test_text_attributes(self) -> None:
        assert sgr_params(Bold()) == "1"
        assert sgr_params(Italic()) == "3"
        assert sgr_params(Underline()) == "4"

    def test_normal_colours(self) -> None:
        assert sgr_params(ForegroundColor(Color.RED)) == "31"
        assert sgr_params(BackgroundColor(Color.WHITE)) == "47"

    def test_bright_colours(self) -> None:
        assert sgr_params(ForegroundColor(Color.BRIGHT_RED)) == "91"
        assert sgr_params(BackgroundColor(Color.BRIGHT_BLACK)) == "100"

    def test_extended_colours(self) -> None:
        assert sgr_params(ForegroundColor(208)) == "38;5;208"
        assert sgr_params(BackgroundColor(17)) == "48;5;17"

    def test_rejects_non_attributes(self) -> None:
        with pytest.raises(TypeError):
            sgr_params("bold")  # type: ignore[arg-type]


class TestCss:
    """Attribute to CSS mapping used by the HTML renderer."""

    def test_palette(self) -> None:
        assert color_to_hex(Color.RED) == "#aa0000"
        assert color_to_hex(Color.BRIGHT_WHITE) == "#ffffff"

    def test_out_of_palette_falls_back_to_black(self) -> None:
        assert color_to_hex(200) == "#000000"

    def test_declarations(self) -> None:
        assert css_declaration(Bold()) == "font-weight: bold;"
        assert css_declaration(Italic()) == "font-style: italic;"
        assert css_declaration(Underline()) == "text-decoration: underline;"
        assert css_declaration(ForegroundColor(Color.BLUE)) == "color: #0000aa;"
        assert (
            css_declaration(BackgroundColor(Color.GREEN))
            == "background-color: #00aa00;"
        )
