"""Exception types raised by the terminal layer."""

from __future__ import annotations


class TerminalUnavailableError(RuntimeError):
    """The controlling terminal cannot be acquired (not a TTY, no attributes)."""


class TerminalIOError(OSError):
    """Reading input or writing a frame failed; the session cannot continue."""
