"""Structured input events produced by the terminal reader.

Keys are matched as ``(code, modifiers)`` pairs, never as strings, so
Control+C and a plain ``c`` are distinct values.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class KeyCode(str, enum.Enum):
    """Non-character keys. Printable keys use the character itself."""

    ESC = "esc"
    ENTER = "enter"
    TAB = "tab"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    INSERT = "insert"
    DELETE = "delete"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"


class Modifiers(enum.Flag):
    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


class KeyEventKind(enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode | str
    modifiers: Modifiers = Modifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind is KeyEventKind.PRESS


@dataclass(frozen=True)
class ResizeEvent:
    columns: int
    rows: int


@dataclass(frozen=True)
class OtherEvent:
    """Mouse reports, focus changes, and sequences the reader does not know."""

    raw: bytes = b""


Event = Union[KeyEvent, ResizeEvent, OtherEvent]

__all__ = [
    "Event",
    "KeyCode",
    "KeyEvent",
    "KeyEventKind",
    "Modifiers",
    "OtherEvent",
    "ResizeEvent",
]
