"""Main interactive event loop for the terminal UI.

Alternates between drawing a frame and blocking for the next input event.
The terminal's raw-mode context wraps the whole loop, so restoration runs on
every exit path, including exceptions raised while drawing or reading.
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Protocol

from ..input import Event, KeyComboRegistry, KeyEvent, build_key_registry, handle_key
from ..layout import Rect, compute_layout, list_viewport_rows, scroll_start_for_selection
from ..render import Frame, render_frame
from ..state import AppState
from ..ui_theme import UITheme

logger = logging.getLogger(__name__)


class TerminalSurface(Protocol):
    def raw_mode(self) -> AbstractContextManager[object]: ...

    def area(self) -> Rect: ...

    def draw(self, frame: Frame) -> None: ...

    def read_event(self) -> Event: ...


def draw_current_frame(state: AppState, terminal: TerminalSurface, theme: UITheme) -> Frame:
    """Size the frame to the terminal, keep the selection in view, and write it."""
    area = terminal.area()
    layout = compute_layout(area)
    state.list_start = scroll_start_for_selection(
        state.list_start,
        state.selection.selected,
        list_viewport_rows(layout.list),
        len(state.snapshot),
    )
    frame = render_frame(state, area, theme, layout)
    terminal.draw(frame)
    return frame


def dispatch_event(state: AppState, registry: KeyComboRegistry, event: Event) -> bool:
    """Apply one event to ``state``; return whether it changed anything.

    Only key presses act. Resize and other events fall through so the next
    redraw picks up the new terminal area.
    """
    if not isinstance(event, KeyEvent):
        return False
    return handle_key(registry, event)


def run_main_loop(state: AppState, terminal: TerminalSurface, theme: UITheme) -> None:
    """Run the interactive loop until a quit key stops ``state``."""
    registry = build_key_registry(state)
    with terminal.raw_mode():
        while state.running:
            draw_current_frame(state, terminal, theme)
            event = terminal.read_event()
            if dispatch_event(state, registry, event):
                logger.debug("handled %r, selected=%s", event, state.selection.selected)
    logger.info("event loop stopped")
