"""Gallery management on top of the persistence layer."""

from .gallery_manager import GalleryManager

__all__ = ["GalleryManager"]
