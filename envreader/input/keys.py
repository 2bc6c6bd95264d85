"""Key bindings for the environment browser.

Binding order matters: the first matching combo wins. ``'q'`` quits with
any modifiers while ``'c'`` quits only together with Control, so a stray
plain ``c`` never ends the session.
"""

from __future__ import annotations

from ..state import AppState
from .events import KeyCode, KeyEvent, Modifiers
from .key_registry import KeyCombo, KeyComboBinding, KeyComboRegistry


def build_key_registry(state: AppState) -> KeyComboRegistry:
    """Bind quit and navigation keys to ``state``."""
    selection = state.selection
    return KeyComboRegistry().register_bindings(
        KeyComboBinding((KeyCombo(KeyCode.ESC),), state.quit),
        KeyComboBinding((KeyCombo("q"),), state.quit),
        KeyComboBinding((KeyCombo("c", Modifiers.CONTROL),), state.quit),
        KeyComboBinding(
            (KeyCombo("h"), KeyCombo(KeyCode.LEFT), KeyCombo("l"), KeyCombo(KeyCode.RIGHT)),
            selection.clear,
        ),
        KeyComboBinding((KeyCombo("k"), KeyCombo(KeyCode.UP)), selection.previous),
        KeyComboBinding((KeyCombo("j"), KeyCombo(KeyCode.DOWN)), selection.next),
        KeyComboBinding((KeyCombo("g"), KeyCombo(KeyCode.PAGE_UP)), selection.first),
        KeyComboBinding((KeyCombo("G"), KeyCombo(KeyCode.PAGE_DOWN)), selection.last),
    )


def handle_key(registry: KeyComboRegistry, event: KeyEvent) -> bool:
    """Dispatch one key event; release and repeat events are ignored."""
    if not event.is_press:
        return False
    return registry.dispatch(event)
