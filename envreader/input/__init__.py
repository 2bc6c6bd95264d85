"""Input-layer public API for event decoding and key dispatch.

Exports are split between low-level terminal decoding (`read_event`) and the
binding table used by the runtime loop.
"""

from .events import Event, KeyCode, KeyEvent, KeyEventKind, Modifiers, OtherEvent, ResizeEvent
from .key_registry import KeyCombo, KeyComboBinding, KeyComboRegistry
from .keys import build_key_registry, handle_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_event

__all__ = [
    "read_event",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Event",
    "KeyCode",
    "KeyEvent",
    "KeyEventKind",
    "Modifiers",
    "OtherEvent",
    "ResizeEvent",
    "KeyCombo",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_key_registry",
    "handle_key",
]
