"""JSON file persistence for the saved gallery."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..config import default_gallery_path
from ..core.gallery import GalleryEntry
from ..errors import GalleryInvalidError
from ..utils.jsonio import read_json, write_json
from ..utils.logging import get_logger

logger = get_logger()


class GalleryStore:
    """Read and write the gallery list stored at :attr:`path`.

    Loading never fails: a missing file yields an empty gallery, a corrupt file is
    logged and treated as empty, and individual malformed records are skipped.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_gallery_path()

    def load(self) -> list[GalleryEntry]:
        if not self.path.exists():
            return []
        try:
            payload = read_json(self.path)
        except GalleryInvalidError as exc:
            logger.error("Failed to load gallery from %s: %s", self.path, exc)
            return []
        if not isinstance(payload, list):
            logger.error("Failed to load gallery from %s: expected a list", self.path)
            return []

        entries: list[GalleryEntry] = []
        for record in payload:
            try:
                entries.append(GalleryEntry.from_dict(record))
            except GalleryInvalidError as exc:
                logger.warning("Skipping gallery record in %s: %s", self.path, exc)
        return entries

    def save(self, entries: Iterable[GalleryEntry]) -> bool:
        """Persist *entries*; return ``False`` and log when the write fails."""

        payload = [entry.to_dict() for entry in entries]
        try:
            write_json(self.path, payload)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save gallery to %s: %s", self.path, exc)
            return False
        logger.info("Saved %d gallery entries to %s", len(payload), self.path)
        return True


__all__ = ["GalleryStore"]
