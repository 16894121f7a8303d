"""Controllers wiring Qt input to the editing session."""

from .shortcut_controller import HistoryShortcutController, resolve_history_shortcut

__all__ = ["HistoryShortcutController", "resolve_history_shortcut"]
