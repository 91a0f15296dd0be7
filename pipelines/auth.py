"""
pipelines/auth.py

Selection-based login: the app trusts whichever profile the user picks.
Two states, Anonymous (``current is None``) and Authenticated(resident).
"""

from __future__ import annotations

import logging
from typing import Optional

from storage.models import Resident

logger = logging.getLogger(__name__)


class AuthSession:
    def __init__(self) -> None:
        self._current: Optional[Resident] = None

    @property
    def current(self) -> Optional[Resident]:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def login(self, resident: Resident) -> None:
        # No existence check against LegacyData; the caller is trusted.
        self._current = resident
        logger.info("Signed in as %s (staff=%s)", resident.resident_id, resident.is_staff)

    def logout(self) -> None:
        if self._current is not None:
            logger.info("Signed out %s", self._current.resident_id)
        self._current = None
