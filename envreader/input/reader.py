"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into structured events.
Handles ESC-sequence timing, xterm modifier parameters, UTF-8 characters,
and resize wake-ups delivered through a self-pipe.
"""

from __future__ import annotations

import os
import select
import shutil

from ..errors import TerminalIOError
from .events import Event, KeyCode, KeyEvent, Modifiers, OtherEvent, ResizeEvent

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_BYTES = 64
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[bytes, KeyCode] = {
    b"A": KeyCode.UP,
    b"B": KeyCode.DOWN,
    b"C": KeyCode.RIGHT,
    b"D": KeyCode.LEFT,
    b"H": KeyCode.HOME,
    b"F": KeyCode.END,
    b"P": KeyCode.F1,
    b"Q": KeyCode.F2,
    b"R": KeyCode.F3,
    b"S": KeyCode.F4,
}

_CSI_TILDE_KEYS: dict[int, KeyCode] = {
    1: KeyCode.HOME,
    2: KeyCode.INSERT,
    3: KeyCode.DELETE,
    4: KeyCode.END,
    5: KeyCode.PAGE_UP,
    6: KeyCode.PAGE_DOWN,
    7: KeyCode.HOME,
    8: KeyCode.END,
    11: KeyCode.F1,
    12: KeyCode.F2,
    13: KeyCode.F3,
    14: KeyCode.F4,
    15: KeyCode.F5,
    17: KeyCode.F6,
    18: KeyCode.F7,
    19: KeyCode.F8,
    20: KeyCode.F9,
    21: KeyCode.F10,
    23: KeyCode.F11,
    24: KeyCode.F12,
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_byte(fd: int) -> bytes:
    ch = os.read(fd, 1)
    if not ch:
        raise TerminalIOError("terminal input closed")
    return ch


def _wait_for_input(fd: int, wake_fd: int | None) -> bool:
    """Block until input or a wake-up arrives; return True for a wake-up.

    Pending keyboard input wins over a simultaneous wake-up so keys are
    never reordered behind a resize.
    """
    watched = [fd] if wake_fd is None else [fd, wake_fd]
    ready, _, _ = select.select(watched, [], [])
    if fd in ready:
        return False
    return wake_fd is not None and wake_fd in ready


def _drain_wake_fd(wake_fd: int) -> None:
    while _read_ready_byte(wake_fd, 0) is not None:
        pass


def _xterm_modifiers(param: bytes) -> Modifiers:
    """Decode the xterm ``1 + bitmask`` modifier parameter."""
    try:
        mask = int(param) - 1
    except ValueError:
        return Modifiers.NONE
    modifiers = Modifiers.NONE
    if mask & 0b0001:
        modifiers |= Modifiers.SHIFT
    if mask & 0b1010:
        modifiers |= Modifiers.ALT
    if mask & 0b0100:
        modifiers |= Modifiers.CONTROL
    return modifiers


def _utf8_continuation_count(value: int) -> int | None:
    """Continuation bytes expected after ``value``; ``None`` for an invalid lead."""
    if value < 0x80:
        return 0
    if 0xC0 <= value < 0xE0:
        return 1
    if 0xE0 <= value < 0xF0:
        return 2
    if 0xF0 <= value < 0xF8:
        return 3
    return None


def _decode_utf8(fd: int, lead: bytes) -> str:
    """Decode one character; a byte that cannot continue it is kept for the next read."""
    extra = _utf8_continuation_count(lead[0])
    if extra is None:
        return "\ufffd"
    data = bytearray(lead)
    for _ in range(extra):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        if not 0x80 <= part[0] < 0xC0:
            _PENDING_BYTES.append(part)
            break
        data += part
    return bytes(data).decode("utf-8", errors="replace")


def _decode_plain_byte(fd: int, ch: bytes) -> KeyEvent:
    """Decode one non-ESC byte (plus UTF-8 continuation bytes)."""
    code = ch[0]
    if ch in {b"\r", b"\n"}:
        return KeyEvent(KeyCode.ENTER)
    if ch == b"\t":
        return KeyEvent(KeyCode.TAB)
    if ch in {b"\x08", b"\x7f"}:
        return KeyEvent(KeyCode.BACKSPACE)
    if code == 0:
        return KeyEvent(" ", Modifiers.CONTROL)
    if code < 0x1B:
        return KeyEvent(chr(code + 0x60), Modifiers.CONTROL)
    if code < 0x20:
        return KeyEvent(chr(code + 0x40), Modifiers.CONTROL)
    return KeyEvent(_decode_utf8(fd, ch))


def _collect_csi(fd: int) -> tuple[bytes, bytes] | None:
    """Read CSI parameter bytes up to the final byte."""
    params = bytearray()
    while len(params) <= MAX_SEQUENCE_BYTES:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return None
        if 0x40 <= part[0] <= 0x7E:
            return bytes(params), part
        params += part
    return None


def _decode_csi(fd: int) -> Event:
    collected = _collect_csi(fd)
    if collected is None:
        return OtherEvent(b"\x1b[")
    params, final = collected
    raw = b"\x1b[" + params + final
    if params.startswith(b"<"):
        # SGR mouse report: ESC [ < btn ; col ; row (M/m)
        return OtherEvent(raw)
    if final == b"M" and not params:
        # X10 mouse report carries three payload bytes.
        for _ in range(3):
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                break
            raw += part
        return OtherEvent(raw)

    parts = params.split(b";")
    modifiers = _xterm_modifiers(parts[1]) if len(parts) > 1 else Modifiers.NONE
    if final == b"Z":
        return KeyEvent(KeyCode.TAB, Modifiers.SHIFT)
    if final == b"~":
        try:
            number = int(parts[0])
        except ValueError:
            return OtherEvent(raw)
        key = _CSI_TILDE_KEYS.get(number)
        return KeyEvent(key, modifiers) if key is not None else OtherEvent(raw)
    key = _CSI_FINAL_KEYS.get(final)
    if key is None:
        return OtherEvent(raw)
    return KeyEvent(key, modifiers)


def _decode_ss3(fd: int) -> Event:
    part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if part is None:
        return KeyEvent("O", Modifiers.ALT)
    key = _CSI_FINAL_KEYS.get(part)
    if key is None:
        return OtherEvent(b"\x1bO" + part)
    return KeyEvent(key)


def _decode_escape(fd: int) -> Event:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyEvent(KeyCode.ESC)
    if seq == b"[":
        return _decode_csi(fd)
    if seq == b"O":
        return _decode_ss3(fd)
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return KeyEvent(KeyCode.ESC)
    key = _decode_plain_byte(fd, seq)
    return KeyEvent(key.code, key.modifiers | Modifiers.ALT)


def read_event(fd: int, wake_fd: int | None = None) -> Event:
    """Block for the next input event on ``fd``.

    When ``wake_fd`` is given, a byte written to it (by a SIGWINCH handler)
    ends the wait with a ``ResizeEvent`` carrying the new terminal size.
    Raises ``TerminalIOError`` when the input stream reaches end of file.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if _wait_for_input(fd, wake_fd):
            _drain_wake_fd(wake_fd)
            size = shutil.get_terminal_size((80, 24))
            return ResizeEvent(size.columns, size.lines)
        ch = _read_byte(fd)

    if ch == b"\x1b":
        return _decode_escape(fd)
    return _decode_plain_byte(fd, ch)
