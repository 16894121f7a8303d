"""Keep the in-memory gallery and its persisted copy in step."""

from __future__ import annotations

from typing import Any

from ..core.gallery import Gallery, GalleryEntry
from ..core.session import FilterSession
from ..io.gallery_store import GalleryStore


class GalleryManager:
    """Own the :class:`Gallery` and write it through :class:`GalleryStore`.

    Writes are fire-and-forget: a failed save is logged by the store and the
    in-memory gallery stays authoritative for the running session.
    """

    def __init__(self, store: GalleryStore, gallery: Gallery | None = None) -> None:
        self._store = store
        self._gallery = gallery if gallery is not None else Gallery()

    @property
    def gallery(self) -> Gallery:
        return self._gallery

    @property
    def entries(self) -> list[GalleryEntry]:
        return list(self._gallery)

    def load(self) -> list[GalleryEntry]:
        """Replace the gallery with the persisted entries."""

        self._gallery.replace(self._store.load())
        return self.entries

    def save_to_gallery(self, session: FilterSession, rendered: Any) -> GalleryEntry:
        entry = session.save_to(self._gallery, rendered)
        self._store.save(self._gallery)
        return entry

    def remove_from_gallery(self, entry_id: int) -> bool:
        removed = self._gallery.remove(entry_id)
        self._store.save(self._gallery)
        return removed


__all__ = ["GalleryManager"]
