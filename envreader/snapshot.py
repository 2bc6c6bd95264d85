"""Point-in-time capture of the process environment.

The snapshot is taken once at startup and never re-queried, so the list the
user browses stays stable for the whole session.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Union, overload

EnvironmentSource = Union[Mapping[str, str], Iterable[tuple[str, str]]]


@dataclass(frozen=True)
class EnvironmentEntry:
    """One environment variable as captured at startup."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class EnvironmentSnapshot:
    """Ordered, fixed-length sequence of captured entries."""

    def __init__(self, entries: Iterable[EnvironmentEntry] = ()) -> None:
        self._entries: tuple[EnvironmentEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EnvironmentEntry]:
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> EnvironmentEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[EnvironmentEntry, ...]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __repr__(self) -> str:
        return f"EnvironmentSnapshot({len(self._entries)} entries)"

    def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]


def capture_environment(source: EnvironmentSource | None = None) -> EnvironmentSnapshot:
    """Capture ``source`` (default ``os.environ``) into an immutable snapshot.

    Mappings are read through ``items()``; any other iterable must yield
    ``(key, value)`` pairs. Source order is preserved.
    """
    if source is None:
        source = os.environ
    pairs = source.items() if isinstance(source, Mapping) else source
    return EnvironmentSnapshot(EnvironmentEntry(str(key), str(value)) for key, value in pairs)


__all__ = [
    "EnvironmentEntry",
    "EnvironmentSnapshot",
    "EnvironmentSource",
    "capture_environment",
]
