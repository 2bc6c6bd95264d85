"""Screen geometry for the header / list / detail / footer layout.

Everything here is pure: callers pass the terminal area and get rectangles
back. Degenerate areas shrink bands to zero rather than failing.
"""

from __future__ import annotations

from dataclasses import dataclass

HEADER_ROWS = 2
FOOTER_ROWS = 1
PANE_TITLE_ROWS = 1


@dataclass(frozen=True)
class Rect:
    """Cell rectangle with origin at the top-left corner of the screen."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class FrameLayout:
    header: Rect
    list: Rect
    detail: Rect
    footer: Rect


def _split_rows(area: Rect, heights: tuple[int, ...]) -> list[Rect]:
    out: list[Rect] = []
    y = area.y
    for height in heights:
        out.append(Rect(area.x, y, area.width, height))
        y += height
    return out


def compute_layout(area: Rect) -> FrameLayout:
    """Split ``area`` into header, list pane, detail pane, and footer.

    Rows are handed out top-down: header first, then the footer, and the
    content band gets what is left. The list pane takes the extra row when
    the content band has an odd height.
    """
    width = max(0, area.width)
    total = max(0, area.height)
    area = Rect(area.x, area.y, width, total)

    header_rows = min(HEADER_ROWS, total)
    footer_rows = min(FOOTER_ROWS, total - header_rows)
    content_rows = total - header_rows - footer_rows
    list_rows = (content_rows + 1) // 2
    detail_rows = content_rows - list_rows

    header, list_area, detail, footer = _split_rows(
        area,
        (header_rows, list_rows, detail_rows, footer_rows),
    )
    return FrameLayout(header=header, list=list_area, detail=detail, footer=footer)


def list_viewport_rows(list_area: Rect) -> int:
    """Return how many entry rows fit below the list pane title."""
    return max(0, list_area.height - PANE_TITLE_ROWS)


def scroll_start_for_selection(
    start: int,
    selected: int | None,
    visible_rows: int,
    count: int,
) -> int:
    """Return the smallest scroll change that keeps ``selected`` on screen.

    With no selection the current offset is only clamped to the list bounds.
    """
    if visible_rows > 0 and selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + visible_rows:
            start = selected - visible_rows + 1
    return max(0, min(start, max(0, count - max(1, visible_rows))))
