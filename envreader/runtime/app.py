"""Runtime composition layer for envreader.

Captures the environment snapshot, resolves the theme, acquires the terminal,
and starts the loop.
"""

from __future__ import annotations

import logging
import sys

from ..config import load_theme_name, no_color_requested
from ..snapshot import EnvironmentSource, capture_environment
from ..state import AppState
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import run_main_loop

logger = logging.getLogger(__name__)


def run_app(
    source: EnvironmentSource | None = None,
    *,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    """Initialize runtime state, wire the terminal, and run the event loop."""
    snapshot = capture_environment(source)
    theme = resolve_theme(load_theme_name(), no_color=no_color_requested())
    terminal = TerminalController(
        sys.stdin.fileno() if stdin_fd is None else stdin_fd,
        sys.stdout.fileno() if stdout_fd is None else stdout_fd,
    )
    state = AppState(snapshot)
    logger.info(
        "starting with %d environment entries, theme=%s, area=%s",
        len(snapshot),
        theme.name,
        terminal.area(),
    )
    run_main_loop(state, terminal, theme)
