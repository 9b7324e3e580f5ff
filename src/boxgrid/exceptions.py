"""
boxgrid exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class BoxgridError(Exception):
    """Base class for errors raised by boxgrid."""


class NotFoundError(BoxgridError, LookupError):
    """A mutation targeted a row or cell that does not exist."""


class RowNotFoundError(NotFoundError, IndexError):
    """Raised when a row index is past the end of the table."""

    def __init__(self, row: int) -> None:
        super().__init__(f"Cannot find row {row}")
        self.row = row


class CellNotFoundError(NotFoundError, IndexError):
    """Raised when a column index is past the end of a row."""

    def __init__(self, column: int) -> None:
        super().__init__(f"Cannot find cell {column}")
        self.column = column


class UnsupportedAttributeError(BoxgridError):
    """Raised by a styled sink for an attribute it cannot render."""

    def __init__(self, attr: object) -> None:
        super().__init__(f"Unsupported attribute: {attr!r}")
        self.attr = attr
