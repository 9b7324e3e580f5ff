"""Cell - a single table entry holding one or more lines of text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from boxgrid.exceptions import UnsupportedAttributeError
from boxgrid.style import Attr, parse_style_spec
from boxgrid.utils import display_width, split_lines

if TYPE_CHECKING:
    from boxgrid.format import Alignment
    from boxgrid.terminal import Sink, StyledSink

logger = logging.getLogger(__name__)


def print_align(
    out: Sink,
    align: Alignment,
    text: str,
    fill: str,
    size: int,
    skip_right_fill: bool = False,
) -> None:
    """Write *text* to *out* aligned within *size* display columns.

    With ``"center"`` an odd amount of fill puts the extra column on the
    right.  Text wider than *size* is written as is.
    """
    text_width = display_width(text)
    nfill = size - text_width if text_width < size else 0
    if align == "right":
        n = nfill
    elif align == "center":
        n = nfill // 2
    else:
        n = 0
    if n > 0:
        out.write(fill * n)
        nfill -= n
    out.write(text)
    if nfill > 0 and not skip_right_fill:
        out.write(fill * nfill)


class Cell:
    """A table cell containing a string.

    The text of a cell cannot be modified once created; a cell with new text
    replaces the old one.  Alignment and style can be changed in place.
    """

    def __init__(self, text: str = "", align: Alignment = "left") -> None:
        self._content = split_lines(text)
        self._width = max(display_width(line) for line in self._content)
        self._align: Alignment = align
        self._style: list[Attr] = []

    @classmethod
    def from_value(cls, value: Any) -> Cell:
        """Create a cell from any value using its ``str()`` form."""
        if isinstance(value, Cell):
            return value
        return cls(str(value))

    # -- alignment / style ---------------------------------------------------

    def align(self, align: Alignment) -> None:
        self._align = align

    def get_align(self) -> Alignment:
        return self._align

    def style(self, attr: Attr) -> None:
        self._style.append(attr)

    def with_style(self, attr: Attr) -> Cell:
        self.style(attr)
        return self

    def get_style(self) -> list[Attr]:
        return list(self._style)

    def reset_style(self) -> None:
        """Remove all style attributes and reset alignment to ``"left"``."""
        self._style.clear()
        self._align = "left"

    def style_spec(self, spec: str) -> Cell:
        """Replace the cell's style with the one described by *spec*.

        ``"FrBybl"`` reads as foreground red, background yellow, bold, left.
        See :func:`boxgrid.style.parse_style_spec` for the full syntax.
        """
        self.reset_style()
        parsed = parse_style_spec(spec)
        self._style.extend(parsed.attrs)
        if parsed.align is not None:
            self._align = parsed.align
        return self

    # -- geometry ------------------------------------------------------------

    def get_height(self) -> int:
        return len(self._content)

    def get_width(self) -> int:
        return self._width

    def get_content(self) -> str:
        return "\n".join(self._content)

    def lines(self) -> list[str]:
        return list(self._content)

    # -- rendering -----------------------------------------------------------

    def print(
        self,
        out: Sink,
        idx: int,
        col_width: int,
        skip_right_fill: bool = False,
    ) -> None:
        """Print line *idx* of the cell, filled to *col_width* columns.

        Lines past the cell's height print as blank.
        """
        text = self._content[idx] if idx < len(self._content) else ""
        print_align(out, self._align, text, " ", col_width, skip_right_fill)

    def print_term(
        self,
        out: StyledSink,
        idx: int,
        col_width: int,
        skip_right_fill: bool = False,
    ) -> None:
        """Apply the cell's style, print line *idx*, then reset.

        Attributes the sink cannot render are skipped.
        """
        for attr in self._style:
            try:
                out.attr(attr)
            except UnsupportedAttributeError:
                logger.debug("Skipping unsupported attribute %r", attr)
        self.print(out, idx, col_width, skip_right_fill)
        out.reset()

    # -- dunder --------------------------------------------------------------

    def __str__(self) -> str:
        return self.get_content()

    def __repr__(self) -> str:
        return f"Cell({self.get_content()!r}, align={self._align!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self._content == other._content
            and self._align == other._align
            and self._style == other._style
        )
