"""Expose Qt models used by the GUI."""

from .edit_session import EditSession

__all__ = ["EditSession"]
