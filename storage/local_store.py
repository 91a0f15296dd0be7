"""
storage/local_store.py

File-backed key-value storage for the Legacy Booth collections.

Each slot is one file ``<data_dir>/<key>.json`` holding a JSON array. The
contract mirrors browser local storage as the app uses it:

- ``load(key, fallback)`` never raises; a missing, unreadable, corrupt or
  non-array slot yields *fallback* itself (no partial merge).
- ``save(key, collection)`` never raises; failures are logged and the write
  is skipped, leaving the last good snapshot on disk.
- No locking. Two sessions writing the same slot: last writer wins.

Writes are atomic (temp file + replace) so a crash mid-write leaves the
previous snapshot intact.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from cryptography.fernet import Fernet, InvalidToken

from storage.crypto import decrypt_text, encrypt_text, get_cipher

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(os.environ.get("LEGACY_BOOTH_DATA_DIR", "data"))

RESIDENTS_KEY = "legacy-residents"
PROMPTS_KEY = "legacy-prompts"
RECORDINGS_KEY = "legacy-recordings"


def _atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    tmp.write_text(text, encoding="utf-8")
    tmp.replace(path)


class LocalStore:
    """Named JSON-array slots in a directory, optionally Fernet-encrypted."""

    def __init__(self, root: Path = DEFAULT_DATA_DIR, cipher: Optional[Fernet] = None):
        self.root = Path(root)
        self.cipher = cipher

    @classmethod
    def from_env(cls) -> "LocalStore":
        return cls(DEFAULT_DATA_DIR, cipher=get_cipher())

    def slot_path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    # -------------------------
    # Raw item access (may raise)
    # -------------------------
    def get_item(self, key: str) -> Optional[str]:
        path = self.slot_path(key)
        if not path.exists():
            return None
        raw = path.read_text(encoding="utf-8")
        if self.cipher is not None:
            return decrypt_text(self.cipher, raw)
        return raw

    def set_item(self, key: str, value: str) -> None:
        if self.cipher is not None:
            value = encrypt_text(self.cipher, value)
        _atomic_write_text(self.slot_path(key), value)

    # -------------------------
    # Collection contract (never raises)
    # -------------------------
    def load(self, key: str, fallback: list[Any]) -> list[Any]:
        try:
            item = self.get_item(key)
            if item is None:
                return fallback
            parsed = json.loads(item)
        except (OSError, ValueError, RecursionError, InvalidToken) as exc:
            logger.warning("Error reading storage slot %r: %s", key, exc)
            return fallback

        if not isinstance(parsed, list):
            logger.warning("Storage slot %r does not hold an array; using fallback.", key)
            return fallback
        return parsed

    def save(self, key: str, collection: list[Any]) -> bool:
        try:
            payload = json.dumps(collection, ensure_ascii=False)
            self.set_item(key, payload)
        except (OSError, TypeError, ValueError, RecursionError) as exc:
            logger.error("Could not save storage slot %r: %s", key, exc)
            return False
        return True
