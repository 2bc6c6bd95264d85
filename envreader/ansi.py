"""Display-width aware text shaping for terminal rows.

Provides sanitizing, clipping, padding, centering, and word wrapping of plain
text. Styling is applied by the renderer after shaping, so widths computed
here never include escape sequences.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
# Stands in for a character wider than the whole wrap width.
OVERWIDE_PLACEHOLDER = "?"
_WRAP_TOKEN_RE = re.compile(r"\s+|\S+")


def char_display_width(ch: str, col: int = 0) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return display columns of ``text``, ignoring ANSI escape sequences."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def _caret(ch: str) -> str:
    code = ord(ch)
    if code == 0x7F:
        return "^?"
    if code < 0x20:
        return "^" + chr(code + 0x40)
    return f"\\x{code:02x}"


def sanitize_text(text: str, *, keep_tabs: bool = False) -> str:
    """Replace control characters with visible caret notation.

    ESC becomes ``^[``, CR becomes ``^M``, DEL becomes ``^?`` and C1 controls
    become ``\\xNN``, so raw terminal sequences can never reach the screen.
    """
    out: list[str] = []
    for ch in text:
        code = ord(ch)
        if ch == "\t" and keep_tabs:
            out.append(ch)
        elif code < 0x20 or code == 0x7F or 0x80 <= code < 0xA0:
            out.append(_caret(ch))
        else:
            out.append(ch)
    return "".join(out)


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain text to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def pad_text(text: str, width: int) -> str:
    """Clip or right-pad plain text to exactly ``width`` columns."""
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def center_text(text: str, width: int) -> str:
    """Center plain text in ``width`` columns, clipping when it does not fit."""
    clipped = clip_text(text, width)
    slack = max(0, width - display_width(clipped))
    left = slack // 2
    return " " * left + clipped + " " * (slack - left)


def _wrap_logical_line(line: str, width: int) -> list[str]:
    rows: list[str] = []
    current: list[str] = []
    col = 0
    for token in _WRAP_TOKEN_RE.findall(line):
        token_width = display_width(token)
        if col + token_width <= width:
            current.append(token)
            col += token_width
            continue
        if current and not token.isspace() and token_width <= width:
            rows.append("".join(current))
            current = [token]
            col = token_width
            continue
        # Long words and overflowing whitespace break at the cell boundary.
        for ch in token:
            w = char_display_width(ch, col)
            if w > width:
                ch, w = OVERWIDE_PLACEHOLDER, 1
            if col + w > width and current:
                rows.append("".join(current))
                current = []
                col = 0
            current.append(ch)
            col += w
    rows.append("".join(current))
    return rows


def wrap_words(text: str, width: int) -> list[str]:
    """Word-wrap ``text`` into rows of at most ``width`` columns.

    Newlines start new rows, tabs expand to tab stops, and whitespace is
    never trimmed: spaces that do not fit at the end of a row continue on
    the next one. Control characters are shown in caret notation.
    """
    if width <= 0:
        return []
    rows: list[str] = []
    for logical in text.split("\n"):
        expanded = sanitize_text(logical, keep_tabs=True).expandtabs(TAB_STOP)
        rows.extend(_wrap_logical_line(expanded, width))
    return rows
