"""Text utilities: display-width measurement and line splitting.

Provides functions for measuring the visible terminal width of cell text
(grapheme-cluster aware, ANSI sequences ignored) and for splitting text
into lines.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

NEWLINE = "\n"

# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

_LINE_SPLIT_RE = re.compile(r"\r?\n")

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (multi-codepoint, contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    # Single codepoint fast path
    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == 0x200D:  # ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000:
        return 2
    if 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


# ---------------------------------------------------------------------------
# display_width
# ---------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove CSI, OSC 8 and APC escape sequences from *text*."""
    return _STRIP_RE.sub("", text)


def display_width(text: str) -> int:
    """Calculate the display width of *text* in terminal columns.

    * Strips ANSI escape sequences.
    * Treats tabs as 3 spaces.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    stripped = stripped.replace("\t", "   ")

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n`` and ``\\r\\n`` only; empty text yields one empty line.

    A single trailing newline does not start an extra line.  Other line
    boundaries such as form feeds are kept as ordinary characters.
    """
    lines = _LINE_SPLIT_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines if lines else [""]
