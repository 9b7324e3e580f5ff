"""boxgrid: aligned, bordered text tables and tree prefixes for the terminal."""

# Cells, rows and tables
from boxgrid.cell import Cell
from boxgrid.row import Row
from boxgrid.table import Table, TableSlice

# Formatting
from boxgrid.format import (
    FORMAT_BORDERS_ONLY,
    FORMAT_BOX_CHARS,
    FORMAT_CLEAN,
    FORMAT_DEFAULT,
    FORMAT_NO_BORDER,
    FORMAT_NO_BORDER_LINE_SEPARATOR,
    FORMAT_NO_COLSEP,
    FORMAT_NO_LINESEP,
    FORMAT_NO_LINESEP_WITH_TITLE,
    FORMAT_NO_TITLE,
    Alignment,
    ColumnPosition,
    FormatBuilder,
    LinePosition,
    LineSeparator,
    TableFormat,
)

# Styles
from boxgrid.style import (
    Attr,
    BackgroundColor,
    Bold,
    Color,
    ForegroundColor,
    Italic,
    Underline,
)

# Output sinks
from boxgrid.terminal import (
    AnsiTerminal,
    BytesSink,
    Sink,
    StreamSink,
    StringSink,
    StyledSink,
    stdout_sink,
)

# Tree prefixes
from boxgrid.tree import provide_prefix

# Errors
from boxgrid.exceptions import (
    BoxgridError,
    CellNotFoundError,
    NotFoundError,
    RowNotFoundError,
    UnsupportedAttributeError,
)

# Utilities
from boxgrid.utils import display_width

__all__ = [
    # Cells, rows and tables
    "Cell",
    "Row",
    "Table",
    "TableSlice",
    # Formatting
    "Alignment",
    "ColumnPosition",
    "FORMAT_BORDERS_ONLY",
    "FORMAT_BOX_CHARS",
    "FORMAT_CLEAN",
    "FORMAT_DEFAULT",
    "FORMAT_NO_BORDER",
    "FORMAT_NO_BORDER_LINE_SEPARATOR",
    "FORMAT_NO_COLSEP",
    "FORMAT_NO_LINESEP",
    "FORMAT_NO_LINESEP_WITH_TITLE",
    "FORMAT_NO_TITLE",
    "FormatBuilder",
    "LinePosition",
    "LineSeparator",
    "TableFormat",
    # Styles
    "Attr",
    "BackgroundColor",
    "Bold",
    "Color",
    "ForegroundColor",
    "Italic",
    "Underline",
    # Output sinks
    "AnsiTerminal",
    "BytesSink",
    "Sink",
    "StreamSink",
    "StringSink",
    "StyledSink",
    "stdout_sink",
    # Tree prefixes
    "provide_prefix",
    # Errors
    "BoxgridError",
    "CellNotFoundError",
    "NotFoundError",
    "RowNotFoundError",
    "UnsupportedAttributeError",
    # Utilities
    "display_width",
]
