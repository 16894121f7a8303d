"""Keyboard shortcuts driving undo and redo of filter edits."""

from __future__ import annotations

from typing import Optional, cast

from PySide6.QtCore import QCoreApplication, QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent

from ..models.edit_session import EditSession

UNDO = "undo"
REDO = "redo"


def resolve_history_shortcut(key: int, modifiers: Qt.KeyboardModifier) -> Optional[str]:
    """Map a key press onto ``"undo"``, ``"redo"`` or ``None``.

    ``Ctrl``/``Cmd`` + ``Z`` undoes; ``Ctrl``/``Cmd`` + ``Y`` and
    ``Ctrl``/``Cmd`` + ``Shift`` + ``Z`` redo.
    """

    # Filter out keypad modifier to simplify checks
    modifiers = modifiers & ~Qt.KeyboardModifier.KeypadModifier
    is_ctrl = bool(modifiers & Qt.KeyboardModifier.ControlModifier)
    is_meta = bool(modifiers & Qt.KeyboardModifier.MetaModifier)
    is_shift = bool(modifiers & Qt.KeyboardModifier.ShiftModifier)
    if not (is_ctrl or is_meta):
        return None

    if key == Qt.Key.Key_Z:
        return REDO if is_shift else UNDO
    if key == Qt.Key.Key_Y and not is_shift:
        return REDO
    return None


class HistoryShortcutController(QObject):
    """Install an application event filter routing undo/redo to an :class:`EditSession`."""

    def __init__(self, session: EditSession, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._session = session
        self._app = QCoreApplication.instance()
        if self._app is not None:
            self._app.installEventFilter(self)

    def shutdown(self) -> None:
        """Remove the global event filter during application shutdown."""

        if self._app is None:
            return
        self._app.removeEventFilter(self)
        self._app = None

    def trigger(self, action: Optional[str]) -> bool:
        """Run *action* against the session; return ``True`` when it was handled."""

        if action == UNDO:
            self._session.undo()
            return True
        if action == REDO:
            self._session.redo()
            return True
        return False

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if event.type() != QEvent.Type.KeyPress:
            return super().eventFilter(watched, event)

        key_event = cast(QKeyEvent, event)
        action = resolve_history_shortcut(key_event.key(), key_event.modifiers())
        if self.trigger(action):
            event.accept()
            return True
        return super().eventFilter(watched, event)


__all__ = ["HistoryShortcutController", "resolve_history_shortcut", "UNDO", "REDO"]
