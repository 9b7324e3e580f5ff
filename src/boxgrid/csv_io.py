"""CSV import and export for tables.

Each CSV record maps to one row and each field to one cell.  On export the
title row, when present, is written as the first record.  On import the
first record can optionally be taken as the title row.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, TextIO

from boxgrid.row import Row
from boxgrid.table import Table

if TYPE_CHECKING:
    from boxgrid.table import TableSlice

logger = logging.getLogger(__name__)


def from_csv(reader: Iterable[list[str]], has_titles: bool = False) -> Table:
    """Build a table from an iterable of records, e.g. a ``csv.reader``."""
    table = Table()
    for record in reader:
        if has_titles and table.titles is None:
            table.set_titles(Row.from_values(record))
        else:
            table.add_row(Row.from_values(record))
    logger.debug("Loaded %d CSV records", len(table) + (table.titles is not None))
    return table


def from_csv_string(text: str, has_titles: bool = False, **fmtparams: Any) -> Table:
    """Build a table from CSV text."""
    return from_csv(csv.reader(io.StringIO(text), **fmtparams), has_titles=has_titles)


def from_csv_file(
    path: str | Path,
    has_titles: bool = False,
    encoding: str = "utf-8",
    **fmtparams: Any,
) -> Table:
    """Build a table from a CSV file."""
    with open(path, newline="", encoding=encoding) as f:
        return from_csv(csv.reader(f, **fmtparams), has_titles=has_titles)


def to_csv(table: Table | TableSlice, out: TextIO, **fmtparams: Any) -> None:
    """Write *table* (titles first) to the text stream *out* as CSV."""
    writer = csv.writer(out, **fmtparams)
    if table.titles is not None:
        writer.writerow(cell.get_content() for cell in table.titles)
    for row in table:
        writer.writerow(cell.get_content() for cell in row)
    out.flush()


def to_csv_string(table: Table | TableSlice, **fmtparams: Any) -> str:
    buf = io.StringIO()
    to_csv(table, buf, **fmtparams)
    return buf.getvalue()
