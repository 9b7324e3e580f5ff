"""Recording terminal for testing -- implements the StyledSink protocol in-memory.

This module provides a ``RecordingTerminal`` class that satisfies the
``boxgrid.terminal.StyledSink`` protocol without performing any real I/O.
Text writes and attribute changes are captured as separate events for
assertions.
"""

from __future__ import annotations

from typing import Literal

from boxgrid.exceptions import UnsupportedAttributeError
from boxgrid.style import Attr

EventKind = Literal["text", "attr", "reset"]


class RecordingTerminal:
    """In-memory styled sink that records all writes for test inspection.

    Parameters
    ----------
    unsupported:
        Attributes for which ``attr`` raises ``UnsupportedAttributeError``.
    """

    def __init__(self, unsupported: tuple[Attr, ...] = ()) -> None:
        self.events: list[tuple[EventKind, str]] = []
        self._unsupported = unsupported
        self.attrs: list[Attr] = []
        self.reset_count = 0
        self.flush_count = 0

    # -- StyledSink protocol ------------------------------------------------

    def write(self, data: str) -> None:
        """Record *data* as a text event."""
        self.events.append(("text", data))

    def flush(self) -> None:
        self.flush_count += 1

    def attr(self, attr: Attr) -> None:
        if attr in self._unsupported:
            raise UnsupportedAttributeError(attr)
        self.attrs.append(attr)
        self.events.append(("attr", type(attr).__name__))

    def reset(self) -> None:
        self.reset_count += 1
        self.events.append(("reset", ""))

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Return everything written, with ``<Attr>`` and ``<reset>`` markers."""
        parts: list[str] = []
        for kind, value in self.events:
            if kind == "text":
                parts.append(value)
            elif kind == "attr":
                parts.append(f"<{value}>")
            else:
                parts.append("<reset>")
        return "".join(parts)

    @property
    def text(self) -> str:
        """Return only the written text, without attribute events."""
        return "".join(value for kind, value in self.events if kind == "text")
