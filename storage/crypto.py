"""
storage/crypto.py

Optional Fernet encryption for Legacy Booth storage slots.

Key lifecycle
-------------
The Fernet key is read from the environment variable LEGACY_DATA_KEY.
LEGACY_DATA_KEY must be a URL-safe base64-encoded 32-byte key as produced by
``Fernet.generate_key()``.

If LEGACY_DATA_KEY is not set, slots are stored as plain JSON. A throwaway
key would make every slot unreadable after a restart, which for this store
means silently reverting to seed data, so no key is ever generated here.

Public API
----------
get_cipher() -> Fernet | None
encrypt_text(cipher, text) -> str
decrypt_text(cipher, token) -> str
"""

import logging
import os
from functools import lru_cache
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

logger = logging.getLogger(__name__)

_ENV_KEY_NAME = "LEGACY_DATA_KEY"


@lru_cache(maxsize=1)
def get_cipher() -> Optional[Fernet]:
    """
    Return a cached Fernet instance, or ``None`` when encryption is off.

    A malformed key is logged and treated as "encryption off" so the app
    still starts.
    """
    raw_key = os.environ.get(_ENV_KEY_NAME)
    if not raw_key:
        logger.debug("%s not set; storage slots are unencrypted.", _ENV_KEY_NAME)
        return None

    try:
        cipher = Fernet(raw_key.encode("utf-8"))
    except ValueError:
        logger.error(
            "%s is not a valid Fernet key; storage slots will be unencrypted.",
            _ENV_KEY_NAME,
        )
        return None

    logger.info("Storage encryption enabled via '%s'.", _ENV_KEY_NAME)
    return cipher


def encrypt_text(cipher: Fernet, text: str) -> str:
    """Encrypt *text* and return the Fernet token as a UTF-8 string."""
    return cipher.encrypt(text.encode("utf-8")).decode("utf-8")


def decrypt_text(cipher: Fernet, token: str) -> str:
    """
    Decrypt a token produced by :func:`encrypt_text`.

    Raises:
        cryptography.fernet.InvalidToken: wrong key or corrupted token.
    """
    try:
        plaintext = cipher.decrypt(token.encode("utf-8"))
    except InvalidToken:
        logger.error("Fernet decryption failed - wrong key or corrupted slot.")
        raise
    return plaintext.decode("utf-8")
