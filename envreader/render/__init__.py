"""Rendering engine for the list/detail terminal view.

A frame is computed first and written second: ``render_frame`` turns the
application state into styled rows and ``frame_payload`` turns those rows
into the bytes the terminal writes. Rendering never mutates state.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..layout import FrameLayout, Rect, compute_layout
from ..state import AppState
from ..ui_theme import UITheme
from .panes import (
    DETAIL_TITLE,
    EMPTY_KEY_PLACEHOLDER,
    FOOTER_HELP,
    HEADER_TITLE,
    HIGHLIGHT_SYMBOL,
    LIST_TITLE,
    NOTHING_SELECTED,
    draw_detail,
    draw_footer,
    draw_header,
    draw_list,
)


class PaneKind(enum.Enum):
    HEADER = "header"
    LIST = "list"
    DETAIL = "detail"
    FOOTER = "footer"


@dataclass(frozen=True)
class Frame:
    """One full redraw: ``height`` rows, each ``width`` display columns."""

    width: int
    height: int
    rows: tuple[str, ...]


def draw_pane(kind: PaneKind, area: Rect, state: AppState, theme: UITheme) -> list[str]:
    if kind is PaneKind.HEADER:
        return draw_header(area, theme)
    if kind is PaneKind.LIST:
        return draw_list(area, state.snapshot, state.selection.selected, state.list_start, theme)
    if kind is PaneKind.DETAIL:
        return draw_detail(area, state.selected_entry, theme)
    return draw_footer(area, theme)


def render_frame(
    state: AppState,
    area: Rect,
    theme: UITheme,
    layout: FrameLayout | None = None,
) -> Frame:
    """Compose header, list, detail, and footer rows for ``area``."""
    if layout is None:
        layout = compute_layout(area)
    regions = (
        (PaneKind.HEADER, layout.header),
        (PaneKind.LIST, layout.list),
        (PaneKind.DETAIL, layout.detail),
        (PaneKind.FOOTER, layout.footer),
    )
    rows: list[str] = []
    for kind, region in regions:
        rows.extend(draw_pane(kind, region, state, theme))
    return Frame(width=max(0, area.width), height=len(rows), rows=tuple(rows))


def frame_payload(frame: Frame) -> bytes:
    """Encode a frame as a home-cursor, clear, then row-by-row write."""
    body = "\r\n".join(frame.rows)
    return f"\033[H\033[J{body}".encode("utf-8", errors="replace")


__all__ = [
    "DETAIL_TITLE",
    "EMPTY_KEY_PLACEHOLDER",
    "FOOTER_HELP",
    "HEADER_TITLE",
    "HIGHLIGHT_SYMBOL",
    "LIST_TITLE",
    "NOTHING_SELECTED",
    "Frame",
    "PaneKind",
    "draw_pane",
    "frame_payload",
    "render_frame",
]
