"""Application-wide constants for the photo editor."""

from __future__ import annotations

from pathlib import Path

WORK_DIR_NAME = ".photoEditor"
"""Directory created inside the user's root to hold editor state."""

GALLERY_FILE_NAME = "photoEditorGallery.json"
"""File name of the persisted gallery, mirroring the browser storage key."""

GALLERY_IMAGE_FORMAT = "PNG"
GALLERY_IMAGE_MIME = "image/png"


def default_gallery_path(root: Path | None = None) -> Path:
    """Return the gallery file location below *root* (defaults to ``~``)."""

    base = Path.home() if root is None else Path(root)
    return base / WORK_DIR_NAME / GALLERY_FILE_NAME
