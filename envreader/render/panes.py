"""Pane drawers for the four screen regions.

Each drawer takes its rectangle plus read-only inputs and returns exactly
``area.height`` styled rows of ``area.width`` display columns. None of them
mutate application state.
"""

from __future__ import annotations

from ..ansi import center_text, pad_text, sanitize_text, wrap_words
from ..layout import Rect, list_viewport_rows
from ..snapshot import EnvironmentEntry, EnvironmentSnapshot
from ..ui_theme import UITheme

HEADER_TITLE = "Environment Reader"
FOOTER_HELP = "Use ↓↑ or 'jk', 'gG' to move, and <Esc>, Ctrl-c or 'q' to quit"
LIST_TITLE = "Environment List"
DETAIL_TITLE = "Value"
NOTHING_SELECTED = "Nothing selected"
EMPTY_KEY_PLACEHOLDER = "<empty>"
HIGHLIGHT_SYMBOL = ">"
DETAIL_PADDING = 1


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _blank_rows(area: Rect, count: int, style: str, theme: UITheme) -> list[str]:
    return [_styled(" " * area.width, style, theme) for _ in range(max(0, count))]


def _panel_title_row(title: str, area: Rect, theme: UITheme) -> str:
    return _styled(center_text(title, area.width), theme.panel_title, theme)


def draw_header(area: Rect, theme: UITheme) -> list[str]:
    if area.is_empty:
        return [""] * max(0, area.height)
    rows = [_styled(center_text(HEADER_TITLE, area.width), theme.title, theme)]
    rows.extend(" " * area.width for _ in range(area.height - 1))
    return rows


def draw_footer(area: Rect, theme: UITheme) -> list[str]:
    if area.is_empty:
        return [""] * max(0, area.height)
    rows = [_styled(center_text(FOOTER_HELP, area.width), theme.footer, theme)]
    rows.extend(" " * area.width for _ in range(area.height - 1))
    return rows


def list_row_label(entry: EnvironmentEntry) -> str:
    """Return the display label for an entry's key."""
    if not entry.key:
        return EMPTY_KEY_PLACEHOLDER
    return sanitize_text(entry.key)


def draw_list(
    area: Rect,
    snapshot: EnvironmentSnapshot,
    selected: int | None,
    list_start: int,
    theme: UITheme,
) -> list[str]:
    """Draw the titled key list starting at row ``list_start``.

    The selected row gets the highlight style and a leading marker; other
    rows get a blank of the same width so keys stay aligned.
    """
    if area.is_empty:
        return [""] * max(0, area.height)
    rows = [_panel_title_row(LIST_TITLE, area, theme)]
    spacer = " " * len(HIGHLIGHT_SYMBOL)
    for offset in range(list_viewport_rows(area)):
        idx = list_start + offset
        if idx >= len(snapshot):
            rows.extend(_blank_rows(area, list_viewport_rows(area) - offset, theme.panel_body, theme))
            break
        label = list_row_label(snapshot[idx])
        if idx == selected:
            rows.append(_styled(pad_text(HIGHLIGHT_SYMBOL + label, area.width), theme.list_highlight, theme))
        else:
            rows.append(_styled(pad_text(spacer + label, area.width), theme.list_item, theme))
    return rows


def draw_detail(area: Rect, entry: EnvironmentEntry | None, theme: UITheme) -> list[str]:
    """Draw the titled value panel, word-wrapped to the padded inner width."""
    if area.is_empty:
        return [""] * max(0, area.height)
    rows = [_panel_title_row(DETAIL_TITLE, area, theme)]
    body_rows = area.height - 1
    inner_width = max(0, area.width - 2 * DETAIL_PADDING)
    if entry is None:
        lines = [NOTHING_SELECTED]
        style = theme.placeholder
    else:
        lines = wrap_words(entry.value, inner_width)
        style = theme.detail_text
    padding = " " * DETAIL_PADDING
    for line in lines[:body_rows]:
        text = pad_text(padding + pad_text(line, inner_width) + padding, area.width)
        rows.append(_styled(text, style, theme))
    rows.extend(_blank_rows(area, area.height - len(rows), theme.panel_body, theme))
    return rows
