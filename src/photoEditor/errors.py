"""Exception hierarchy for the photo editor core."""

from __future__ import annotations


class PhotoEditorError(Exception):
    """Base class for all errors raised by :mod:`photoEditor`."""


class InvalidParameterKey(PhotoEditorError, KeyError):
    """Raised when an adjustment key is not one of the known filters."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown filter parameter: {self.key!r}"


class InvalidParameterValue(PhotoEditorError, TypeError):
    """Raised when an adjustment value is not a real number."""

    def __init__(self, key: str, value: object) -> None:
        super().__init__(key, value)
        self.key = key
        self.value = value

    def __str__(self) -> str:
        return f"Filter parameter {self.key!r} expects a number, got {self.value!r}"


class GalleryInvalidError(PhotoEditorError):
    """Raised when the persisted gallery cannot be read or decoded."""
