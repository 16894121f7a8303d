"""Qt facing wrapper around :class:`~photoEditor.core.session.FilterSession`."""

from __future__ import annotations

from typing import Any, Optional

from PySide6.QtCore import QObject, Signal

from ....core.descriptors import FilterOperation
from ....core.parameters import ParameterSet
from ....core.session import FilterSession


class EditSession(QObject):
    """Expose filter edits to widgets through Qt signals.

    Signals fire after the underlying session has finished updating, so slots may
    read back any state immediately.
    """

    valueChanged = Signal(str, float)
    """Emitted with the key and new value after a single slider edit."""

    valuesChanged = Signal()
    """Emitted after undo, redo or an image load replaced several values at once."""

    resetPerformed = Signal()
    imageLoaded = Signal()

    historyChanged = Signal(bool, bool)
    """Emitted with ``(can_undo, can_redo)`` whenever the history cursor moves."""

    def __init__(
        self,
        session: Optional[FilterSession] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else FilterSession()

    # ------------------------------------------------------------------
    @property
    def session(self) -> FilterSession:
        return self._session

    def value(self, key: str) -> float:
        return self._session.value(key)

    def values(self) -> ParameterSet:
        return self._session.parameters

    def can_undo(self) -> bool:
        return self._session.can_undo

    def can_redo(self) -> bool:
        return self._session.can_redo

    def filter_style(self) -> str:
        return self._session.filter_style()

    def composable_descriptor(self) -> list[FilterOperation]:
        return self._session.composable_descriptor()

    def advanced_filter_data(self) -> dict[str, float]:
        return self._session.advanced_filter_data()

    # ------------------------------------------------------------------
    def set_value(self, key: str, value: float) -> None:
        """Apply a slider edit; bad keys or values raise before any state change."""

        emitted = float(value)
        self._session.update_filter(key, value)
        self.valueChanged.emit(key, emitted)
        self._emit_history()

    def reset(self) -> None:
        self._session.reset_filters()
        self.resetPerformed.emit()
        self._emit_history()

    def load_original(self, image: Any) -> None:
        self._session.load_original(image)
        self.imageLoaded.emit()
        self.valuesChanged.emit()
        self._emit_history()

    def undo(self) -> bool:
        if not self._session.undo():
            return False
        self.valuesChanged.emit()
        self._emit_history()
        return True

    def redo(self) -> bool:
        if not self._session.redo():
            return False
        self.valuesChanged.emit()
        self._emit_history()
        return True

    def _emit_history(self) -> None:
        self.historyChanged.emit(self._session.can_undo, self._session.can_redo)


__all__ = ["EditSession"]
