"""
storage/media.py

Persists uploaded video files next to the storage slots and returns the
``VideoRef`` that a recording keeps.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from storage.local_store import DEFAULT_DATA_DIR
from storage.models import VideoRef

logger = logging.getLogger(__name__)

MEDIA_SUBDIR = "media"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(name: str) -> str:
    """Strip directories and unsafe characters from an uploaded file name."""
    base = Path(name or "").name
    cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
    return cleaned or "upload"


def save_media(name: str, data: bytes, stamp: str, root: Path = DEFAULT_DATA_DIR) -> VideoRef:
    """
    Write *data* to ``<root>/media/<stamp>_<name>``.

    On failure the error is logged and a ``VideoRef`` with an empty url is
    returned, so the recording can still be submitted for this session.
    """
    target = Path(root) / MEDIA_SUBDIR / f"{stamp}_{safe_filename(name)}"
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        logger.error("Could not store media file %r: %s", name, exc)
        return VideoRef(name=name, url="")

    logger.info("Stored media file %s (%d bytes)", target, len(data))
    return VideoRef(name=name, url=target.as_posix())
