"""Read and atomically write the JSON documents kept by the editor."""

from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any

from ..errors import GalleryInvalidError


def read_json(path: Path) -> Any:
    """Return the document decoded from *path*.

    Every failure to open or decode the file surfaces as
    :class:`GalleryInvalidError`.
    """

    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise GalleryInvalidError(f"JSON file not found: {path}") from exc
    except OSError as exc:
        raise GalleryInvalidError(f"Cannot read {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise GalleryInvalidError(f"Invalid JSON data in {path}") from exc
    except RecursionError as exc:
        raise GalleryInvalidError(f"JSON data in {path} is nested too deeply") from exc


def atomic_write_text(path: Path, data: str) -> None:
    """Write *data* to a sibling temp file, then swap it over *path*."""

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)
    with tmp_path.open("w", encoding="utf-8") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())
    # Windows may briefly lock either file while scanners touch it.
    retries = 5
    for attempt in range(retries):
        try:
            tmp_path.replace(path)
            return
        except PermissionError:
            if attempt == retries - 1:
                tmp_path.unlink(missing_ok=True)
                raise
            time.sleep(0.05 * (attempt + 1))


def write_json(path: Path, data: Any) -> None:
    """Serialise *data* with stable key order and write it atomically."""

    atomic_write_text(path, json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True))
