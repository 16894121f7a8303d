"""Linear undo/redo history of filter parameter snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .parameters import FILTER_KEYS

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistorySnapshot:
    """Immutable copy of a :class:`ParameterSet` taken at one edit."""

    filters: Mapping[str, float]

    @classmethod
    def capture(cls, parameters: Mapping[str, float]) -> HistorySnapshot:
        """Return a snapshot detached from *parameters*."""

        values = {key: parameters[key] for key in FILTER_KEYS}
        return cls(filters=MappingProxyType(values))


class HistoryLedger:
    """Ordered snapshots plus a cursor marking the active entry.

    Recording while the cursor sits before the last entry discards the redo branch
    first, so history never forks.
    """

    def __init__(self) -> None:
        self._entries: list[HistorySnapshot] = []
        self._index = -1

    @property
    def index(self) -> int:
        """Cursor position; ``-1`` when the ledger is empty."""

        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    @property
    def current(self) -> HistorySnapshot | None:
        """Snapshot under the cursor, or ``None`` for an empty ledger."""

        if self._index < 0:
            return None
        return self._entries[self._index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistorySnapshot]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> HistorySnapshot:
        return self._entries[index]

    def record(self, parameters: Mapping[str, float]) -> HistorySnapshot:
        """Append a copy of *parameters* and move the cursor onto it."""

        if self.can_redo:
            dropped = len(self._entries) - (self._index + 1)
            del self._entries[self._index + 1 :]
            _LOGGER.debug("discarded %d redo entries", dropped)
        snapshot = HistorySnapshot.capture(parameters)
        self._entries.append(snapshot)
        self._index = len(self._entries) - 1
        return snapshot

    def undo(self) -> HistorySnapshot | None:
        """Step back one entry; return it, or ``None`` at the oldest entry."""

        if not self.can_undo:
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> HistorySnapshot | None:
        """Step forward one entry; return it, or ``None`` at the newest entry."""

        if not self.can_redo:
            return None
        self._index += 1
        return self._entries[self._index]

    def clear(self) -> None:
        self._entries.clear()
        self._index = -1


__all__ = ["HistoryLedger", "HistorySnapshot"]
