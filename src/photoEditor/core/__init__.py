"""Filter state, history and descriptor projection."""

from __future__ import annotations

from .descriptors import FilterOperation, composable_descriptor, filter_style, raw_descriptor
from .gallery import Gallery, GalleryEntry, encode_image
from .history import HistoryLedger, HistorySnapshot
from .parameters import FILTER_DEFAULTS, FILTER_KEYS, ParameterSet
from .session import FilterSession

__all__ = [
    "FILTER_DEFAULTS",
    "FILTER_KEYS",
    "FilterOperation",
    "FilterSession",
    "Gallery",
    "GalleryEntry",
    "HistoryLedger",
    "HistorySnapshot",
    "ParameterSet",
    "composable_descriptor",
    "encode_image",
    "filter_style",
    "raw_descriptor",
]
