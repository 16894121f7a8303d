"""Filter state and history engine for the photo editor."""

from __future__ import annotations

from .core.descriptors import (
    FilterOperation,
    composable_descriptor,
    filter_style,
    raw_descriptor,
)
from .core.history import HistoryLedger, HistorySnapshot
from .core.parameters import FILTER_DEFAULTS, FILTER_KEYS, ParameterSet
from .core.session import FilterSession
from .errors import (
    GalleryInvalidError,
    InvalidParameterKey,
    InvalidParameterValue,
    PhotoEditorError,
)

__all__ = [
    "FILTER_DEFAULTS",
    "FILTER_KEYS",
    "FilterOperation",
    "FilterSession",
    "GalleryInvalidError",
    "HistoryLedger",
    "HistorySnapshot",
    "InvalidParameterKey",
    "InvalidParameterValue",
    "ParameterSet",
    "PhotoEditorError",
    "composable_descriptor",
    "filter_style",
    "raw_descriptor",
]
