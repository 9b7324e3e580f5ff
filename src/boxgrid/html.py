"""HTML rendering of a table or table slice."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from boxgrid.cell import Cell
from boxgrid.style import css_declaration
from boxgrid.utils import strip_ansi

if TYPE_CHECKING:
    from boxgrid.row import Row
    from boxgrid.table import TableSlice
    from boxgrid.terminal import Sink


def cell_to_html(cell: Cell, tag: str = "td") -> str:
    """Render *cell* as a ``<td>`` (or *tag*) element with inline CSS."""
    content = "<br />".join(html.escape(strip_ansi(line)) for line in cell.lines())
    styles = "".join(css_declaration(attr) for attr in cell.get_style())
    styles += f"text-align: {cell.get_align()};"
    return f'<{tag} style="{styles}">{content}</{tag}>'


def row_to_html(row: Row, column_num: int, tag: str = "td") -> str:
    """Render *row* padded with empty cells up to *column_num* columns."""
    parts = [cell_to_html(cell, tag) for cell in row]
    for _ in range(len(row), column_num):
        parts.append(cell_to_html(Cell(), tag))
    return "".join(parts)


def print_html(table: TableSlice, out: Sink) -> None:
    column_num = table.get_column_num()
    out.write("<table>")
    if table.titles is not None:
        out.write("<tr>")
        out.write(row_to_html(table.titles, column_num, "th"))
        out.write("</tr>")
    for row in table.rows:
        out.write("<tr>")
        out.write(row_to_html(row, column_num))
        out.write("</tr>")
    out.write("</table>")
    out.flush()
