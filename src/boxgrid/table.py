"""Table and TableSlice - column layout and full-table rendering.

A :class:`Table` owns an optional title row, its body rows and a
:class:`~boxgrid.format.TableFormat`.  Rendering is done by
:class:`TableSlice`, a read-only view over a contiguous range of rows that
shares the table's format and titles; the table renders itself through a
view over all of its rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, overload

from boxgrid.cell import Cell
from boxgrid.exceptions import RowNotFoundError
from boxgrid.format import FORMAT_DEFAULT, TableFormat
from boxgrid.html import print_html as write_html
from boxgrid.row import Row
from boxgrid.terminal import AnsiTerminal, StringSink, stdout_sink

if TYPE_CHECKING:
    from boxgrid.terminal import Sink, StyledSink


def _row_range(rows: range, key: slice) -> range:
    """Apply *key* to *rows*, refusing anything but a contiguous slice."""
    if key.step not in (None, 1):
        raise ValueError("Table slices must be contiguous (step 1)")
    return rows[key]


# ---------------------------------------------------------------------------
# TableSlice
# ---------------------------------------------------------------------------


class TableSlice:
    """Read-only view over a contiguous range of a table's rows.

    The view holds a reference to its table, not a copy of the rows: rows,
    titles and format are read from the table whenever the view is used.
    Indices past the table's current end are skipped.
    """

    def __init__(self, table: Table, rows: range) -> None:
        self._table = table
        self._range = rows

    @property
    def format(self) -> TableFormat:
        return self._table._format

    @property
    def titles(self) -> Row | None:
        return self._table._titles

    @property
    def rows(self) -> list[Row]:
        table_rows = self._table._rows
        return [table_rows[i] for i in self._range if i < len(table_rows)]

    # -- sequence protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    @overload
    def __getitem__(self, key: int) -> Row: ...

    @overload
    def __getitem__(self, key: slice) -> TableSlice: ...

    def __getitem__(self, key: int | slice) -> Row | TableSlice:
        if isinstance(key, slice):
            return TableSlice(self._table, _row_range(self._range, key))
        return self.rows[key]

    def get_row(self, row: int) -> Row | None:
        rows = self.rows
        if 0 <= row < len(rows):
            return rows[row]
        return None

    def slice(self, start: int | None = None, stop: int | None = None) -> TableSlice:
        return self[start:stop]

    # -- layout --------------------------------------------------------------

    def get_column_num(self) -> int:
        """Return the number of columns, counting the title row."""
        cnum = len(self.titles) if self.titles is not None else 0
        for row in self.rows:
            cnum = max(cnum, len(row))
        return cnum

    def get_column_width(self, col_idx: int) -> int:
        """Return the width of column *col_idx*, 0 if nothing is in it."""
        width = self.titles.get_cell_width(col_idx) if self.titles is not None else 0
        for row in self.rows:
            width = max(width, row.get_cell_width(col_idx))
        return width

    def get_all_column_width(self) -> list[int]:
        return [self.get_column_width(i) for i in range(self.get_column_num())]

    def column_iter(self, column: int) -> Iterator[Cell]:
        """Yield the cells of *column*, top to bottom, skipping rows without it."""
        for row in self.rows:
            cell = row.get_cell(column)
            if cell is not None:
                yield cell

    column_iter_mut = column_iter

    def row_iter(self) -> Iterator[Row]:
        return iter(self.rows)

    # -- rendering -----------------------------------------------------------

    def _print(
        self,
        out: Sink,
        print_row: Callable[[Row, Any, TableFormat, list[int]], int],
    ) -> int:
        fmt = self.format
        titles = self.titles
        rows = self.rows
        col_width = self.get_all_column_width()
        height = fmt.print_line_separator(out, col_width, "top")
        if titles is not None:
            height += print_row(titles, out, fmt, col_width)
            height += fmt.print_line_separator(out, col_width, "title")
        last = len(rows) - 1
        for i, row in enumerate(rows):
            height += print_row(row, out, fmt, col_width)
            if i < last:
                height += fmt.print_line_separator(out, col_width, "intern")
        height += fmt.print_line_separator(out, col_width, "bottom")
        out.flush()
        return height

    def print(self, out: Sink) -> int:
        """Print the table to *out* and return the number of lines written."""
        return self._print(out, Row.print)

    def print_term(self, out: StyledSink) -> int:
        """Print the table to a styled sink, applying cell styles."""
        return self._print(out, Row.print_term)

    def printstd(self) -> int:
        """Print to standard output, styled when the terminal allows it."""
        sink = stdout_sink()
        if isinstance(sink, AnsiTerminal):
            return self.print_term(sink)
        return self.print(sink)

    def print_html(self, out: Sink) -> None:
        """Print the table as an HTML ``<table>`` element."""
        write_html(self, out)

    def to_string(self) -> str:
        sink = StringSink()
        self.print(sink)
        return sink.getvalue()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TableSlice(rows={self._range!r})"


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


class Table:
    """A printable table: optional titles, body rows and a format.

    Rows may have different lengths; the column count is that of the longest
    row (titles included) and missing cells print blank.
    """

    def __init__(self, rows: Iterable[Row | Iterable[Any]] | None = None) -> None:
        self._rows: list[Row] = [_to_row(r) for r in rows] if rows is not None else []
        self._titles: Row | None = None
        self._format: TableFormat = FORMAT_DEFAULT.copy()

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> Table:
        """Build a table from nested iterables of values."""
        return cls(rows)

    # -- format / titles -----------------------------------------------------

    def set_format(self, format: TableFormat) -> None:
        self._format = format.copy()

    def get_format(self) -> TableFormat:
        return self._format

    @property
    def titles(self) -> Row | None:
        return self._titles

    def set_titles(self, titles: Row | Iterable[Any]) -> None:
        self._titles = _to_row(titles)

    def unset_titles(self) -> None:
        self._titles = None

    # -- rows ----------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def get_row(self, row: int) -> Row | None:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def add_row(self, row: Row | Iterable[Any]) -> Row:
        """Append *row* and return it."""
        row = _to_row(row)
        self._rows.append(row)
        return row

    def add_empty_row(self) -> Row:
        return self.add_row(Row())

    def insert_row(self, index: int, row: Row | Iterable[Any]) -> Row:
        """Insert *row* at *index*, appending when *index* is past the end.

        Negative indices do not count from the end; they raise
        :class:`RowNotFoundError`.
        """
        if index < 0:
            raise RowNotFoundError(index)
        row = _to_row(row)
        if index < len(self._rows):
            self._rows.insert(index, row)
        else:
            self._rows.append(row)
        return row

    def remove_row(self, index: int) -> None:
        """Remove the row at *index*; out-of-range indices are ignored."""
        if 0 <= index < len(self._rows):
            del self._rows[index]

    def extend(self, rows: Iterable[Row | Iterable[Any]]) -> None:
        for row in rows:
            self.add_row(row)

    def set_element(self, element: str, column: int, row: int) -> None:
        """Replace a single cell with a new one holding *element*.

        Raises :class:`RowNotFoundError` when *row* does not exist and
        :class:`CellNotFoundError` when the row has no cell at *column*.
        The table is never grown implicitly.
        """
        target = self.get_row(row)
        if target is None:
            raise RowNotFoundError(row)
        target.set_cell(Cell(element), column)

    def add_column(self, values: Iterable[Any]) -> None:
        """Append a column holding *values*, one per row from the top.

        Missing rows are created and short rows padded with empty cells so
        that every value lands in the new column.
        """
        column = self.get_column_num()
        for i, value in enumerate(values):
            if i >= len(self._rows):
                self._rows.append(Row())
            row = self._rows[i]
            while len(row) < column:
                row.add_cell(Cell())
            row.add_cell(Cell.from_value(value))

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    @overload
    def __getitem__(self, key: int) -> Row: ...

    @overload
    def __getitem__(self, key: slice) -> TableSlice: ...

    def __getitem__(self, key: int | slice) -> Row | TableSlice:
        if isinstance(key, slice):
            return TableSlice(self, _row_range(range(len(self._rows)), key))
        return self._rows[key]

    def __setitem__(self, index: int, row: Row | Iterable[Any]) -> None:
        self._rows[index] = _to_row(row)

    def slice(self, start: int | None = None, stop: int | None = None) -> TableSlice:
        return self[start:stop]

    def as_slice(self) -> TableSlice:
        """Return a view over every row of the table."""
        return TableSlice(self, range(len(self._rows)))

    # -- delegated to the full view ------------------------------------------

    def get_column_num(self) -> int:
        return self.as_slice().get_column_num()

    def get_column_width(self, col_idx: int) -> int:
        return self.as_slice().get_column_width(col_idx)

    def get_all_column_width(self) -> list[int]:
        return self.as_slice().get_all_column_width()

    def column_iter(self, column: int) -> Iterator[Cell]:
        return self.as_slice().column_iter(column)

    column_iter_mut = column_iter

    def row_iter(self) -> Iterator[Row]:
        return iter(self._rows)

    def print(self, out: Sink) -> int:
        return self.as_slice().print(out)

    def print_term(self, out: StyledSink) -> int:
        return self.as_slice().print_term(out)

    def printstd(self) -> int:
        return self.as_slice().printstd()

    def print_html(self, out: Sink) -> None:
        self.as_slice().print_html(out)

    def to_string(self) -> str:
        return self.as_slice().to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Table(titles={self._titles!r}, rows={self._rows!r})"


def _to_row(value: Row | Iterable[Any]) -> Row:
    if isinstance(value, Row):
        return value
    return Row.from_values(value)
