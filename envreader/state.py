from __future__ import annotations

from dataclasses import dataclass, field

from .selection import SelectionState
from .snapshot import EnvironmentEntry, EnvironmentSnapshot


@dataclass
class AppState:
    snapshot: EnvironmentSnapshot
    selection: SelectionState = field(init=False)
    running: bool = True
    list_start: int = 0

    def __post_init__(self) -> None:
        self.selection = SelectionState(len(self.snapshot))

    @property
    def selected_entry(self) -> EnvironmentEntry | None:
        selected = self.selection.selected
        if selected is None:
            return None
        return self.snapshot[selected]

    def quit(self) -> None:
        self.running = False
