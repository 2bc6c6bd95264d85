"""Selection model for the environment list.

Navigation is saturating: moving past either end holds at the boundary
instead of wrapping. An empty list can never hold a selection.
"""

from __future__ import annotations


class SelectionState:
    """Optional highlighted index into a list of ``size`` entries."""

    def __init__(self, size: int, selected: int | None = None) -> None:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        if selected is not None and not 0 <= selected < size:
            raise ValueError(f"selected index {selected} out of range for {size} entries")
        self.size = size
        self.selected = selected

    def __repr__(self) -> str:
        return f"SelectionState(size={self.size}, selected={self.selected})"

    def clear(self) -> None:
        self.selected = None

    def next(self) -> None:
        """Move down one row, starting at the top when nothing is selected."""
        if self.size == 0:
            return
        if self.selected is None:
            self.selected = 0
            return
        self.selected = min(self.selected + 1, self.size - 1)

    def previous(self) -> None:
        """Move up one row, starting at the top when nothing is selected."""
        if self.size == 0:
            return
        if self.selected is None:
            self.selected = 0
            return
        self.selected = max(self.selected - 1, 0)

    def first(self) -> None:
        if self.size == 0:
            return
        self.selected = 0

    def last(self) -> None:
        if self.size == 0:
            return
        self.selected = self.size - 1
