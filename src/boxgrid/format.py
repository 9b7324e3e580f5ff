"""Table formatting rules: separators, borders, padding and indentation.

A :class:`TableFormat` is a plain value.  Tables keep their own copy and
rows receive it at render time, so a format is never shared mutably between
tables.  :class:`FormatBuilder` offers a fluent way to assemble one, and the
``FORMAT_*`` constants cover the common layouts.  The constants are
read-only; call ``.copy()`` on one to get a format that can be changed.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Literal, Sequence

from boxgrid.utils import NEWLINE

if TYPE_CHECKING:
    from boxgrid.terminal import Sink

Alignment = Literal["left", "center", "right"]
"""Alignment of a cell's text within its column."""

LinePosition = Literal["top", "title", "intern", "bottom"]
"""Position of a horizontal line separator in a table."""

ColumnPosition = Literal["left", "intern", "right"]
"""Position of a column separator in a row."""


# ---------------------------------------------------------------------------
# LineSeparator
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LineSeparator:
    """Characters used to draw a horizontal rule.

    ``line`` fills the width of each column, ``junc`` is written between two
    columns and ``ljunc`` / ``rjunc`` at the left and right borders.
    """

    line: str = "-"
    junc: str = "+"
    ljunc: str = "+"
    rjunc: str = "+"

    def print(
        self,
        out: Sink,
        col_width: Sequence[int],
        padding: tuple[int, int],
        colsep: bool,
        lborder: bool,
        rborder: bool,
    ) -> int:
        """Write a full separator line to *out* and return the lines written."""
        if lborder:
            out.write(self.ljunc)
        last = len(col_width) - 1
        for i, width in enumerate(col_width):
            out.write(self.line * (width + padding[0] + padding[1]))
            if colsep and i < last:
                out.write(self.junc)
        if rborder:
            out.write(self.rjunc)
        out.write(NEWLINE)
        return 1


# ---------------------------------------------------------------------------
# TableFormat
# ---------------------------------------------------------------------------


@dataclass
class TableFormat:
    """Decoration rules for a table.

    Every element is optional: a table with no separators at all still
    prints its aligned cells.  The title separator falls back to the
    internal one when unset.
    """

    csep: str | None = None
    lborder: str | None = None
    rborder: str | None = None
    lsep: LineSeparator | None = None
    tsep: LineSeparator | None = None
    top_sep: LineSeparator | None = None
    bottom_sep: LineSeparator | None = None
    pad_left: int = 0
    pad_right: int = 0
    indent_width: int = 0

    # -- padding / indent ----------------------------------------------------

    def get_padding(self) -> tuple[int, int]:
        return (self.pad_left, self.pad_right)

    def padding(self, left: int, right: int) -> None:
        self.pad_left = left
        self.pad_right = right

    def get_indent(self) -> int:
        return self.indent_width

    def indent(self, spaces: int) -> None:
        """Set the number of spaces written before every line of the table."""
        self.indent_width = spaces

    # -- column separators ---------------------------------------------------

    def column_separator(self, separator: str) -> None:
        self.csep = separator

    def borders(self, border: str) -> None:
        """Use *border* as both the left and the right border."""
        self.lborder = border
        self.rborder = border

    def left_border(self, border: str) -> None:
        self.lborder = border

    def right_border(self, border: str) -> None:
        self.rborder = border

    def get_column_separator(self, pos: ColumnPosition) -> str | None:
        if pos == "left":
            return self.lborder
        if pos == "right":
            return self.rborder
        return self.csep

    def print_column_separator(self, out: Sink, pos: ColumnPosition) -> None:
        """Write the separator or border for *pos*, if one is configured."""
        sep = self.get_column_separator(pos)
        if sep is not None:
            out.write(sep)

    # -- line separators -----------------------------------------------------

    def separator(self, what: LinePosition, separator: LineSeparator) -> None:
        if what == "top":
            self.top_sep = separator
        elif what == "bottom":
            self.bottom_sep = separator
        elif what == "title":
            self.tsep = separator
        else:
            self.lsep = separator

    def separators(self, what: Sequence[LinePosition], separator: LineSeparator) -> None:
        for pos in what:
            self.separator(pos, separator)

    def get_sep_for_line(self, pos: LinePosition) -> LineSeparator | None:
        if pos == "top":
            return self.top_sep
        if pos == "bottom":
            return self.bottom_sep
        if pos == "title":
            return self.tsep if self.tsep is not None else self.lsep
        return self.lsep

    def print_line_separator(
        self,
        out: Sink,
        col_width: Sequence[int],
        pos: LinePosition,
    ) -> int:
        """Write the line separator for *pos* and return the lines written.

        Nothing at all is written (not even a newline) when no separator is
        configured for *pos*.
        """
        sep = self.get_sep_for_line(pos)
        if sep is None:
            return 0
        out.write(" " * self.indent_width)
        return sep.print(
            out,
            col_width,
            self.get_padding(),
            self.csep is not None,
            self.lborder is not None,
            self.rborder is not None,
        )

    def copy(self) -> TableFormat:
        return copy.copy(self)


# ---------------------------------------------------------------------------
# FormatBuilder
# ---------------------------------------------------------------------------


class FormatBuilder:
    """Fluent builder for :class:`TableFormat`."""

    def __init__(self) -> None:
        self._format = TableFormat()

    def padding(self, left: int, right: int) -> FormatBuilder:
        self._format.padding(left, right)
        return self

    def column_separator(self, separator: str) -> FormatBuilder:
        self._format.column_separator(separator)
        return self

    def borders(self, border: str) -> FormatBuilder:
        self._format.borders(border)
        return self

    def left_border(self, border: str) -> FormatBuilder:
        self._format.left_border(border)
        return self

    def right_border(self, border: str) -> FormatBuilder:
        self._format.right_border(border)
        return self

    def separator(self, what: LinePosition, separator: LineSeparator) -> FormatBuilder:
        self._format.separator(what, separator)
        return self

    def separators(
        self, what: Sequence[LinePosition], separator: LineSeparator
    ) -> FormatBuilder:
        self._format.separators(what, separator)
        return self

    def indent(self, spaces: int) -> FormatBuilder:
        self._format.indent(spaces)
        return self

    def build(self) -> TableFormat:
        """Return the assembled format (the builder can keep being used)."""
        return self._format.copy()


# ---------------------------------------------------------------------------
# Predefined formats
# ---------------------------------------------------------------------------


class _PresetFormat(TableFormat):
    """A :class:`TableFormat` that cannot be changed in place.

    Setters raise ``AttributeError``; :meth:`copy` returns a plain, mutable
    :class:`TableFormat` to customise.
    """

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(
            f"Cannot set {name!r} on a predefined format; customise a .copy() instead"
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete {name!r} from a predefined format")

    def copy(self) -> TableFormat:
        return TableFormat(**{f.name: getattr(self, f.name) for f in fields(TableFormat)})


def _preset(fmt: TableFormat) -> TableFormat:
    preset = object.__new__(_PresetFormat)
    for f in fields(TableFormat):
        object.__setattr__(preset, f.name, getattr(fmt, f.name))
    return preset


MINUS_PLUS_SEP = LineSeparator("-", "+", "+", "+")
EQU_PLUS_SEP = LineSeparator("=", "+", "+", "+")

# +----+----+
# | T1 | T2 |
# +====+====+
# | a  | b  |
# +----+----+
# | d  | c  |
# +----+----+
FORMAT_DEFAULT = _preset(
    FormatBuilder()
    .column_separator("|")
    .borders("|")
    .separator("intern", MINUS_PLUS_SEP)
    .separator("title", EQU_PLUS_SEP)
    .separator("bottom", MINUS_PLUS_SEP)
    .separator("top", MINUS_PLUS_SEP)
    .padding(1, 1)
    .build()
)

# Same as FORMAT_DEFAULT with a plain title separator
FORMAT_NO_TITLE = _preset(
    FormatBuilder()
    .column_separator("|")
    .borders("|")
    .separators(["intern", "title", "bottom", "top"], MINUS_PLUS_SEP)
    .padding(1, 1)
    .build()
)

# +----+----+
# | T1 | T2 |
# +----+----+
# | a  | b  |
# | c  | d  |
# +----+----+
FORMAT_NO_LINESEP_WITH_TITLE = _preset(
    FormatBuilder()
    .column_separator("|")
    .borders("|")
    .separators(["title", "bottom", "top"], MINUS_PLUS_SEP)
    .padding(1, 1)
    .build()
)

# +----+----+
# | T1 | T2 |
# | a  | b  |
# | c  | d  |
# +----+----+
FORMAT_NO_LINESEP = _preset(
    FormatBuilder()
    .column_separator("|")
    .borders("|")
    .separators(["bottom", "top"], MINUS_PLUS_SEP)
    .padding(1, 1)
    .build()
)

# ---------
#  T1  T2
# =========
#  a   b
# ---------
#  d   c
# ---------
FORMAT_NO_COLSEP = _preset(
    FormatBuilder()
    .separators(["intern", "bottom", "top"], MINUS_PLUS_SEP)
    .separator("title", EQU_PLUS_SEP)
    .padding(1, 1)
    .build()
)

#  T1  T2
#  a   b
#  d   c
FORMAT_CLEAN = _preset(FormatBuilder().padding(1, 1).build())

# +--------+
# | T1  T2 |
# +========+
# | a   b  |
# | c   d  |
# +--------+
FORMAT_BORDERS_ONLY = _preset(
    FormatBuilder()
    .padding(1, 1)
    .separator("title", EQU_PLUS_SEP)
    .separators(["bottom", "top"], MINUS_PLUS_SEP)
    .borders("|")
    .build()
)

#  T1 | T2
# ====+====
#  a  | b
# ----+----
#  c  | d
FORMAT_NO_BORDER = _preset(
    FormatBuilder()
    .padding(1, 1)
    .separator("intern", MINUS_PLUS_SEP)
    .separator("title", EQU_PLUS_SEP)
    .column_separator("|")
    .build()
)

#  T1 | T2
# ----+----
#  a  | b
#  c  | d
FORMAT_NO_BORDER_LINE_SEPARATOR = _preset(
    FormatBuilder()
    .padding(1, 1)
    .separator("title", MINUS_PLUS_SEP)
    .column_separator("|")
    .build()
)

# ┌────┬────┐
# │ T1 │ T2 │
# ├────┼────┤
# │ a  │ b  │
# └────┴────┘
FORMAT_BOX_CHARS = _preset(
    FormatBuilder()
    .column_separator("│")
    .borders("│")
    .separator("top", LineSeparator("─", "┬", "┌", "┐"))
    .separator("intern", LineSeparator("─", "┼", "├", "┤"))
    .separator("bottom", LineSeparator("─", "┴", "└", "┘"))
    .padding(1, 1)
    .build()
)
