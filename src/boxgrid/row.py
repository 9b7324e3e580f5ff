"""Row - an ordered collection of cells forming one line of a table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Sequence

from boxgrid.cell import Cell
from boxgrid.exceptions import CellNotFoundError
from boxgrid.utils import NEWLINE

if TYPE_CHECKING:
    from boxgrid.format import TableFormat
    from boxgrid.terminal import Sink, StyledSink


class Row:
    """A table row made of cells.

    Rows in one table may have different lengths; missing cells print blank.
    """

    def __init__(self, cells: Iterable[Cell] | None = None) -> None:
        self._cells: list[Cell] = list(cells) if cells is not None else []

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Row:
        """Build a row from arbitrary values, one cell per ``str()``."""
        return cls(Cell.from_value(v) for v in values)

    @classmethod
    def empty(cls) -> Row:
        return cls()

    # -- size ----------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def get_height(self) -> int:
        """Return the row height; at least 1 so empty rows still print."""
        height = 1
        for cell in self._cells:
            height = max(height, cell.get_height())
        return height

    def get_cell_width(self, column: int) -> int:
        """Return the width of the cell at *column*, or 0 if there is none."""
        cell = self.get_cell(column)
        return cell.get_width() if cell is not None else 0

    # -- access --------------------------------------------------------------

    def get_cell(self, idx: int) -> Cell | None:
        if 0 <= idx < len(self._cells):
            return self._cells[idx]
        return None

    def set_cell(self, cell: Cell, column: int) -> None:
        """Replace the cell at *column*.

        Raises :class:`CellNotFoundError` if the row has no such column.
        """
        if not 0 <= column < len(self._cells):
            raise CellNotFoundError(column)
        self._cells[column] = cell

    def add_cell(self, cell: Cell) -> None:
        self._cells.append(cell)

    def insert_cell(self, index: int, cell: Cell) -> None:
        """Insert *cell* at *index*, appending when *index* is past the end.

        Negative indices do not count from the end; they raise
        :class:`CellNotFoundError`.
        """
        if index < 0:
            raise CellNotFoundError(index)
        if index < len(self._cells):
            self._cells.insert(index, cell)
        else:
            self._cells.append(cell)

    def remove_cell(self, index: int) -> None:
        """Remove the cell at *index*; out-of-range indices are ignored."""
        if 0 <= index < len(self._cells):
            del self._cells[index]

    def __getitem__(self, idx: int) -> Cell:
        return self._cells[idx]

    def __setitem__(self, idx: int, cell: Cell) -> None:
        self._cells[idx] = cell

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Row({self._cells!r})"

    # -- rendering -----------------------------------------------------------

    def _print(
        self,
        out: Sink,
        format: TableFormat,
        col_width: Sequence[int],
        print_cell: Callable[[Cell, Any, int, int, bool], None],
    ) -> int:
        height = self.get_height()
        lp, rp = format.get_padding()
        indent = " " * format.get_indent()
        last = len(col_width) - 1
        no_right_border = format.get_column_separator("right") is None
        for i in range(height):
            out.write(indent)
            format.print_column_separator(out, "left")
            for j, width in enumerate(col_width):
                out.write(" " * lp)
                skip_r_fill = j == last and no_right_border
                cell = self.get_cell(j)
                print_cell(cell if cell is not None else Cell(), out, i, width, skip_r_fill)
                out.write(" " * rp)
                if j < last:
                    format.print_column_separator(out, "intern")
            format.print_column_separator(out, "right")
            out.write(NEWLINE)
        return height

    def print(self, out: Sink, format: TableFormat, col_width: Sequence[int]) -> int:
        """Print every line of the row and return the number of lines written."""
        return self._print(out, format, col_width, Cell.print)

    def print_term(
        self, out: StyledSink, format: TableFormat, col_width: Sequence[int]
    ) -> int:
        """Like :meth:`print`, applying cell styles on a styled sink."""
        return self._print(out, format, col_width, Cell.print_term)
