"""Ordered ``(code, modifiers)`` key-dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .events import KeyCode, KeyEvent, Modifiers


@dataclass(frozen=True)
class KeyCombo:
    """Key code plus required modifiers; ``None`` modifiers match any set."""

    code: KeyCode | str
    modifiers: Modifiers | None = None

    def matches(self, event: KeyEvent) -> bool:
        if event.code != self.code:
            return False
        return self.modifiers is None or event.modifiers == self.modifiers


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key combos to a single action callback."""

    combos: tuple[KeyCombo, ...]
    handler: Callable[[], None]


class KeyComboRegistry:
    """Key-dispatch table where the first registered matching combo wins."""

    def __init__(self) -> None:
        self._bindings: list[KeyComboBinding] = []

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        self._bindings.append(binding)
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings in priority order; returns ``self``."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, event: KeyEvent) -> Callable[[], None] | None:
        for binding in self._bindings:
            if any(combo.matches(event) for combo in binding.combos):
                return binding.handler
        return None

    def dispatch(self, event: KeyEvent) -> bool:
        """Invoke the handler bound to ``event``; return whether one matched."""
        handler = self.lookup(event)
        if handler is None:
            return False
        handler()
        return True
