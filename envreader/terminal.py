"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, frame output, and the
SIGWINCH self-pipe that lets a blocking read wake up on resize.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import termios
import tty

from .errors import TerminalUnavailableError
from .input import Event, read_event
from .layout import Rect
from .render import Frame, frame_payload

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_SIZE = (80, 24)


class TerminalController:
    """Terminal surface: area queries, frame writes, and blocking input."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
            raise TerminalUnavailableError("stdin and stdout must be attached to a terminal")
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalUnavailableError(f"cannot read terminal attributes: {exc}") from exc
        self._wake_read_fd: int | None = None
        self._wake_write_fd: int | None = None
        self._previous_winch_handler = None

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self._install_resize_wakeup()
        logger.debug("terminal entered raw mode")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and the main screen buffer."""
        self._remove_resize_wakeup()
        try:
            # Show cursor and restore the main screen buffer.
            os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            logger.debug("terminal restored")

    def _install_resize_wakeup(self) -> None:
        read_fd, write_fd = os.pipe()
        os.set_blocking(read_fd, False)
        os.set_blocking(write_fd, False)
        self._wake_read_fd = read_fd
        self._wake_write_fd = write_fd
        self._previous_winch_handler = signal.signal(signal.SIGWINCH, self._on_resize_signal)

    def _remove_resize_wakeup(self) -> None:
        if self._wake_read_fd is None or self._wake_write_fd is None:
            return
        signal.signal(signal.SIGWINCH, self._previous_winch_handler or signal.SIG_DFL)
        os.close(self._wake_read_fd)
        os.close(self._wake_write_fd)
        self._wake_read_fd = None
        self._wake_write_fd = None
        self._previous_winch_handler = None

    def _on_resize_signal(self, _signum, _frame) -> None:
        if self._wake_write_fd is None:
            return
        with contextlib.suppress(BlockingIOError):
            os.write(self._wake_write_fd, b"\0")

    def area(self) -> Rect:
        """Return the drawable area of the bound output terminal in cells."""
        try:
            columns, lines = os.get_terminal_size(self.stdout_fd)
        except OSError:
            columns, lines = DEFAULT_TERMINAL_SIZE
        default_columns, default_lines = DEFAULT_TERMINAL_SIZE
        return Rect(0, 0, columns or default_columns, lines or default_lines)

    def draw(self, frame: Frame) -> None:
        """Write a full frame, retrying partial writes until all bytes land."""
        payload = memoryview(frame_payload(frame))
        while payload:
            written = os.write(self.stdout_fd, payload)
            payload = payload[written:]

    def read_event(self) -> Event:
        """Block until the next key, resize, or other input event."""
        return read_event(self.stdin_fd, self._wake_read_fd)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()
