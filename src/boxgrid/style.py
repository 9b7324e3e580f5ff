"""Abstract cell style attributes and the style-spec mini-language.

Cells only carry these attributes; turning them into escape codes or CSS is
left to the sink that renders them (see :mod:`boxgrid.terminal` and
:mod:`boxgrid.html`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from boxgrid.format import Alignment

logger = logging.getLogger(__name__)


class Color(IntEnum):
    """The 16 standard terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15


@dataclass(frozen=True)
class Bold:
    pass


@dataclass(frozen=True)
class Italic:
    pass


@dataclass(frozen=True)
class Underline:
    pass


@dataclass(frozen=True)
class ForegroundColor:
    color: int


@dataclass(frozen=True)
class BackgroundColor:
    color: int


Attr = Union[Bold, Italic, Underline, ForegroundColor, BackgroundColor]


# ---------------------------------------------------------------------------
# Style spec parsing
# ---------------------------------------------------------------------------

_SPEC_COLORS: dict[str, Color] = {
    "r": Color.RED,
    "R": Color.BRIGHT_RED,
    "b": Color.BLUE,
    "B": Color.BRIGHT_BLUE,
    "g": Color.GREEN,
    "G": Color.BRIGHT_GREEN,
    "y": Color.YELLOW,
    "Y": Color.BRIGHT_YELLOW,
    "c": Color.CYAN,
    "C": Color.BRIGHT_CYAN,
    "m": Color.MAGENTA,
    "M": Color.BRIGHT_MAGENTA,
    "w": Color.WHITE,
    "W": Color.BRIGHT_WHITE,
    "d": Color.BLACK,
    "D": Color.BRIGHT_BLACK,
}

_SPEC_ATTRS: dict[str, Attr] = {
    "b": Bold(),
    "i": Italic(),
    "u": Underline(),
}

_SPEC_ALIGN: dict[str, Alignment] = {"c": "center", "l": "left", "r": "right"}


@dataclass
class ParsedSpec:
    """Result of :func:`parse_style_spec`."""

    attrs: list[Attr]
    align: Alignment | None = None


def parse_style_spec(spec: str) -> ParsedSpec:
    """Parse a style specifier such as ``"FrBybl"``.

    ``F`` and ``B`` switch to an "expecting colour" state that the next
    character resolves into a foreground or background colour.  ``b``, ``i``
    and ``u`` add bold, italic and underline; ``c``, ``l`` and ``r`` pick the
    alignment (the last one wins).  Unknown characters are dropped; an
    unknown colour letter also cancels the pending colour.
    """
    parsed = ParsedSpec(attrs=[])
    pending: str | None = None
    for ch in spec:
        if pending is not None:
            color = _SPEC_COLORS.get(ch)
            if color is None:
                logger.debug("Ignoring unknown colour %r in style spec %r", ch, spec)
            elif pending == "F":
                parsed.attrs.append(ForegroundColor(color))
            else:
                parsed.attrs.append(BackgroundColor(color))
            pending = None
        elif ch in ("F", "B"):
            pending = ch
        elif ch in _SPEC_ATTRS:
            parsed.attrs.append(_SPEC_ATTRS[ch])
        elif ch in _SPEC_ALIGN:
            parsed.align = _SPEC_ALIGN[ch]
        elif ch != "d":
            logger.debug("Ignoring unknown token %r in style spec %r", ch, spec)
    return parsed


# ---------------------------------------------------------------------------
# SGR mapping
# ---------------------------------------------------------------------------

def sgr_params(attr: Attr) -> str:
    """Return the SGR parameter string for *attr* (e.g. ``"1"`` or ``"91"``)."""
    if isinstance(attr, Bold):
        return "1"
    if isinstance(attr, Italic):
        return "3"
    if isinstance(attr, Underline):
        return "4"
    if isinstance(attr, ForegroundColor):
        return _color_params(attr.color, 30, 90, 38)
    if isinstance(attr, BackgroundColor):
        return _color_params(attr.color, 40, 100, 48)
    raise TypeError(f"Not a style attribute: {attr!r}")


def _color_params(color: int, base: int, bright_base: int, extended: int) -> str:
    if color < 8:
        return str(base + color)
    if color < 16:
        return str(bright_base + color - 8)
    # 256-color: 38;5;N / 48;5;N
    return f"{extended};5;{color}"


# ---------------------------------------------------------------------------
# CSS mapping
# ---------------------------------------------------------------------------

_HTML_PALETTE = (
    "#000000",
    "#aa0000",
    "#00aa00",
    "#aa5500",
    "#0000aa",
    "#aa00aa",
    "#00aaaa",
    "#aaaaaa",
    "#555555",
    "#ff5555",
    "#55ff55",
    "#ffff55",
    "#5555ff",
    "#ff55ff",
    "#55ffff",
    "#ffffff",
)


def color_to_hex(color: int) -> str:
    """Map a 16-colour palette index to a CSS hex colour."""
    if 0 <= color < len(_HTML_PALETTE):
        return _HTML_PALETTE[color]
    return "#000000"


def css_declaration(attr: Attr) -> str:
    """Return the CSS declaration matching *attr*."""
    if isinstance(attr, Bold):
        return "font-weight: bold;"
    if isinstance(attr, Italic):
        return "font-style: italic;"
    if isinstance(attr, Underline):
        return "text-decoration: underline;"
    if isinstance(attr, ForegroundColor):
        return f"color: {color_to_hex(attr.color)};"
    if isinstance(attr, BackgroundColor):
        return f"background-color: {color_to_hex(attr.color)};"
    return ""
