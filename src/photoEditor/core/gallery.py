"""Saved edits kept in the gallery."""

from __future__ import annotations

import base64
import io
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from PIL import Image

from ..config import GALLERY_IMAGE_FORMAT, GALLERY_IMAGE_MIME
from ..errors import GalleryInvalidError, InvalidParameterKey, InvalidParameterValue
from .parameters import ParameterSet

_DATA_URL_PREFIX = f"data:{GALLERY_IMAGE_MIME};base64,"


def encode_image(image: Image.Image | bytes | str) -> str:
    """Return *image* as a PNG data URL.

    ``bytes`` are taken as an already encoded PNG and strings starting with
    ``data:`` are assumed to be data URLs produced by the renderer.
    """

    if isinstance(image, str):
        if not image.startswith("data:"):
            raise ValueError("expected a data URL")
        return image
    if isinstance(image, (bytes, bytearray, memoryview)):
        payload = bytes(image)
    elif isinstance(image, Image.Image):
        buffer = io.BytesIO()
        image.save(buffer, format=GALLERY_IMAGE_FORMAT)
        payload = buffer.getvalue()
    else:
        raise TypeError(f"cannot encode {type(image).__name__} for the gallery")
    return _DATA_URL_PREFIX + base64.b64encode(payload).decode("ascii")


def decode_image(data_url: str) -> Image.Image:
    """Return the Pillow image stored in *data_url*."""

    header, _, encoded = data_url.partition(",")
    if not header.startswith("data:") or ";base64" not in header:
        raise ValueError("expected a base64 data URL")
    image = Image.open(io.BytesIO(base64.b64decode(encoded)))
    image.load()
    return image


@dataclass(frozen=True)
class GalleryEntry:
    """A saved edit: the rendered image plus the parameters that produced it."""

    id: int
    image: str
    filters: Mapping[str, float]
    date: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "image": self.image,
            "filters": dict(self.filters),
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, payload: object) -> GalleryEntry:
        """Validate a persisted record and return it as an entry."""

        if not isinstance(payload, Mapping):
            raise GalleryInvalidError("gallery record is not an object")
        entry_id = payload.get("id")
        image = payload.get("image")
        if isinstance(entry_id, bool) or not isinstance(entry_id, int):
            raise GalleryInvalidError(f"gallery record has invalid id {entry_id!r}")
        if not isinstance(image, str):
            raise GalleryInvalidError(f"gallery record {entry_id} has no image")
        raw_filters = payload.get("filters")
        if not isinstance(raw_filters, Mapping):
            raise GalleryInvalidError(f"gallery record {entry_id} has no filters")
        try:
            filters = ParameterSet(raw_filters)
        except (InvalidParameterKey, InvalidParameterValue) as exc:
            raise GalleryInvalidError(f"gallery record {entry_id}: {exc}") from exc
        date = payload.get("date")
        return cls(
            id=entry_id,
            image=image,
            filters=MappingProxyType(filters.values_dict()),
            date=date if isinstance(date, str) else "",
        )


class Gallery:
    """In-memory list of :class:`GalleryEntry`, oldest first."""

    def __init__(self, entries: Optional[list[GalleryEntry]] = None) -> None:
        self._entries: list[GalleryEntry] = list(entries or [])

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[GalleryEntry]:
        return iter(list(self._entries))

    def next_id(self, now_ms: int | None = None) -> int:
        """Return a millisecond timestamp id not yet used by any entry."""

        candidate = int(time.time() * 1000) if now_ms is None else int(now_ms)
        used = {entry.id for entry in self._entries}
        while candidate in used:
            candidate += 1
        return candidate

    def create_entry(
        self,
        image: str,
        filters: Mapping[str, float],
        *,
        now: datetime | None = None,
    ) -> GalleryEntry:
        """Build and append a new entry holding a copy of *filters*."""

        moment = now if now is not None else datetime.now(timezone.utc)
        entry = GalleryEntry(
            id=self.next_id(int(moment.timestamp() * 1000)),
            image=image,
            filters=MappingProxyType(ParameterSet(filters).values_dict()),
            date=moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
        )
        self.add(entry)
        return entry

    def add(self, entry: GalleryEntry) -> None:
        self._entries.append(entry)

    def remove(self, entry_id: int) -> bool:
        """Drop the entry with *entry_id*; unknown ids are ignored."""

        remaining = [entry for entry in self._entries if entry.id != entry_id]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        return removed

    def replace(self, entries: list[GalleryEntry]) -> None:
        self._entries = list(entries)

    def to_payload(self) -> list[dict[str, Any]]:
        return [entry.to_dict() for entry in self._entries]


__all__ = ["Gallery", "GalleryEntry", "decode_image", "encode_image"]
