"""Output sinks for rendered tables.

Provides the ``Sink`` and ``StyledSink`` protocols that rendering writes to,
plus concrete implementations:

* :class:`StringSink` collects output in memory.
* :class:`StreamSink` forwards to any text stream.
* :class:`BytesSink` encodes to UTF-8 for binary streams.
* :class:`AnsiTerminal` is a styled sink emitting ANSI SGR sequences.

:func:`stdout_sink` picks between a plain and a styled sink for standard
output based on the environment (``NO_COLOR``, ``BOXGRID_COLOR``,
``BOXGRID_COLORS``, ``TERM``) and whether stdout is a TTY.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import BinaryIO, Protocol, TextIO

from boxgrid.exceptions import UnsupportedAttributeError
from boxgrid.style import Attr, BackgroundColor, ForegroundColor, sgr_params

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_SGR_FMT = "\x1b[{}m"
_SGR_RESET = "\x1b[0m"

_DEFAULT_COLORS = 16


# ---------------------------------------------------------------------------
# Sink protocols
# ---------------------------------------------------------------------------


class Sink(Protocol):
    """Anything rendered text can be written to."""

    def write(self, data: str) -> object: ...

    def flush(self) -> None: ...


class StyledSink(Sink, Protocol):
    """A sink that can also switch text attributes on and off.

    ``attr`` raises :class:`~boxgrid.exceptions.UnsupportedAttributeError`
    for attributes the sink cannot render.
    """

    def attr(self, attr: Attr) -> None: ...

    def reset(self) -> None: ...


# ---------------------------------------------------------------------------
# Plain sinks
# ---------------------------------------------------------------------------


class StringSink:
    """In-memory sink that accumulates everything written to it."""

    def __init__(self) -> None:
        self._buffer: list[str] = []

    def write(self, data: str) -> None:
        self._buffer.append(data)

    def flush(self) -> None:
        pass

    def getvalue(self) -> str:
        return "".join(self._buffer)


class StreamSink:
    """Forward writes to a text stream such as ``sys.stdout``."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, data: str) -> None:
        self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()


class BytesSink:
    """Encode writes as UTF-8 for a binary stream.

    ``"\\n"`` is translated to *newline* (the platform line separator by
    default), mirroring what a text-mode stream would do.
    """

    def __init__(
        self,
        stream: BinaryIO,
        newline: str = os.linesep,
        encoding: str = "utf-8",
    ) -> None:
        self._stream = stream
        self._newline = newline
        self._encoding = encoding

    def write(self, data: str) -> None:
        if self._newline != "\n":
            data = data.replace("\n", self._newline)
        self._stream.write(data.encode(self._encoding))

    def flush(self) -> None:
        self._stream.flush()


# ---------------------------------------------------------------------------
# AnsiTerminal
# ---------------------------------------------------------------------------


class AnsiTerminal:
    """Styled sink that writes ANSI SGR sequences around styled text.

    *colors* is the number of colours the terminal is assumed to support
    (8, 16 or 256).  Colour attributes outside that range are rejected with
    :class:`UnsupportedAttributeError` so callers can skip them.
    """

    def __init__(self, stream: TextIO, colors: int = _DEFAULT_COLORS) -> None:
        self._stream = stream
        self._colors = colors

    @property
    def colors(self) -> int:
        return self._colors

    def supports_attr(self, attr: Attr) -> bool:
        if isinstance(attr, (ForegroundColor, BackgroundColor)):
            return 0 <= attr.color < self._colors
        return True

    def attr(self, attr: Attr) -> None:
        if not self.supports_attr(attr):
            raise UnsupportedAttributeError(attr)
        self._stream.write(_SGR_FMT.format(sgr_params(attr)))

    def reset(self) -> None:
        self._stream.write(_SGR_RESET)

    def write(self, data: str) -> None:
        self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()


# ---------------------------------------------------------------------------
# Standard output selection
# ---------------------------------------------------------------------------


def _color_count() -> int:
    raw = os.environ.get("BOXGRID_COLORS", "")
    try:
        return int(raw) if raw else _DEFAULT_COLORS
    except ValueError:
        logger.debug("Ignoring invalid BOXGRID_COLORS=%r", raw)
        return _DEFAULT_COLORS


def color_enabled(stream: TextIO) -> bool:
    """Decide whether ANSI styling should be written to *stream*."""
    mode = os.environ.get("BOXGRID_COLOR", "auto").lower()
    if mode == "always":
        return True
    if mode == "never" or os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def stdout_sink(stream: TextIO | None = None) -> Sink:
    """Return a styled sink for a colour-capable terminal, a plain one otherwise."""
    stream = stream if stream is not None else sys.stdout
    if color_enabled(stream):
        colors = _color_count()
        logger.debug("Writing styled output with %d colours", colors)
        return AnsiTerminal(stream, colors=colors)
    logger.debug("Writing plain output")
    return StreamSink(stream)
