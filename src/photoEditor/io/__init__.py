"""Persistence collaborators for the photo editor."""

from .gallery_store import GalleryStore

__all__ = ["GalleryStore"]
