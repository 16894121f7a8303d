"""Per-document editing session owning the live filters and their history."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .descriptors import FilterOperation, composable_descriptor, filter_style, raw_descriptor
from .gallery import Gallery, GalleryEntry, encode_image
from .history import HistoryLedger, HistorySnapshot
from .parameters import ParameterSet

_LOGGER = logging.getLogger(__name__)


class FilterSession:
    """Hold the original image, the live :class:`ParameterSet` and its ledger.

    One session exists per open document; nothing is shared between sessions.  Every
    mutating call records exactly one history entry before returning.
    """

    def __init__(self) -> None:
        self.original_image: Any = None
        self.edited_image: Any = None
        self.current_image: Any = None
        self._parameters = ParameterSet()
        self._history = HistoryLedger()
        self._history.record(self._parameters)

    # ------------------------------------------------------------------
    @property
    def parameters(self) -> ParameterSet:
        """Copy of the live parameters; edits must go through :meth:`update_filter`."""

        return self._parameters.copy()

    @property
    def history(self) -> HistoryLedger:
        return self._history

    @property
    def has_image(self) -> bool:
        return self.original_image is not None

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def value(self, key: str) -> float:
        return self._parameters[key]

    # ------------------------------------------------------------------
    def load_original(self, image: Any) -> None:
        """Start editing *image* with default filters and a fresh history."""

        parameters = ParameterSet()
        history = HistoryLedger()
        history.record(parameters)

        # Swap everything in one step so the cursor never refers to the old image.
        self.original_image = image
        self.edited_image = image
        self.current_image = image
        self._parameters = parameters
        self._history = history
        _LOGGER.debug("loaded original image, history reset")

    def update_current_image(self, image: Any) -> None:
        """Replace the preview image without touching filters or history."""

        self.current_image = image

    def update_filter(self, key: str, value: float) -> HistorySnapshot:
        """Set one filter value and record the edit."""

        self._parameters.update(key, value)
        return self._history.record(self._parameters)

    def reset_filters(self) -> HistorySnapshot:
        """Restore all defaults as a single undoable step."""

        self._parameters.reset()
        return self._history.record(self._parameters)

    def undo(self) -> bool:
        """Restore the previous snapshot; return ``False`` when there is none."""

        snapshot = self._history.undo()
        if snapshot is None:
            return False
        self._parameters.assign(snapshot.filters)
        return True

    def redo(self) -> bool:
        """Re-apply the next snapshot; return ``False`` when there is none."""

        snapshot = self._history.redo()
        if snapshot is None:
            return False
        self._parameters.assign(snapshot.filters)
        return True

    # ------------------------------------------------------------------
    def composable_descriptor(self) -> list[FilterOperation]:
        return composable_descriptor(self._parameters)

    def filter_style(self) -> str:
        return filter_style(self._parameters)

    def advanced_filter_data(self) -> dict[str, float]:
        return raw_descriptor(self._parameters)

    def save_to(self, gallery: Gallery, rendered: Any) -> GalleryEntry:
        """Append the current edit to *gallery* using the *rendered* image."""

        return gallery.create_entry(encode_image(rendered), self._parameters)

    def snapshot(self) -> Mapping[str, float]:
        return self._parameters.values_dict()


__all__ = ["FilterSession"]
