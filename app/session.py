"""
app/session.py

Per-session services and the context object handed to every screen.

Screens never reach into ``st.session_state`` for core state; the shell builds
a ``ScreenContext`` on each run and passes it to ``render(ctx)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping, Optional

from pipelines.auth import AuthSession
from pipelines.legacy_data import LegacyData
from pipelines.navigation import Navigator, View
from storage.local_store import LocalStore
from storage.models import Resident

logger = logging.getLogger(__name__)


@dataclass
class ScreenContext:
    data: LegacyData
    auth: AuthSession
    navigator: Navigator
    rerun: Callable[[], None]
    view_context: Mapping[str, Any] = field(default_factory=dict)
    demo_mode: bool = True

    @property
    def current_user(self) -> Optional[Resident]:
        return self.auth.current

    def navigate(self, view: View, context: Optional[Mapping[str, Any]] = None) -> None:
        self.navigator.navigate(view, context)
        self.rerun()

    def login(self, resident: Resident) -> None:
        self.auth.login(resident)
        self.rerun()

    def logout(self) -> None:
        self.auth.logout()
        self.rerun()


def init_session(state: MutableMapping[str, Any], store_factory: Callable[[], LocalStore] = LocalStore.from_env) -> None:
    """Create the session's services once; later runs reuse them."""
    if "legacy_data" not in state:
        state["legacy_data"] = LegacyData(store_factory())
    if "auth" not in state:
        state["auth"] = AuthSession()
    if "navigator" not in state:
        state["navigator"] = Navigator()
    if "demo_mode" not in state:
        state["demo_mode"] = True


# ---------------------------------------------------------------------------
# Per-user screen state
# ---------------------------------------------------------------------------
RECORDING_DONE_KEY = "recording_submitted"
GREETING_DRAFT_KEY = "greeting_draft"
FRESH_PROMPTS_KEY = "fresh_prompts"
PROMPTS_CATEGORY_KEY = "prompts_category"
DETAIL_KEY_PREFIX = "detail:"

SCREEN_STATE_KEYS = frozenset(
    {RECORDING_DONE_KEY, GREETING_DRAFT_KEY, FRESH_PROMPTS_KEY, PROMPTS_CATEGORY_KEY}
)
_OWNER_KEY = "screen_state_owner"


def detail_key(recording_id: str, field_name: str) -> str:
    return f"{DETAIL_KEY_PREFIX}{recording_id}:{field_name}"


def sync_screen_state(state: MutableMapping[str, Any], resident: Optional[Resident]) -> bool:
    """
    Drop screen state left by a different user (or by the signed-out session).

    Returns True when the owner changed (the keys were dropped).
    """
    owner = resident.resident_id if resident is not None else None
    if state.get(_OWNER_KEY) == owner:
        return False
    stale = [k for k in list(state) if k in SCREEN_STATE_KEYS or str(k).startswith(DETAIL_KEY_PREFIX)]
    for key in stale:
        del state[key]
    state[_OWNER_KEY] = owner
    if stale:
        logger.info("Cleared %d screen state keys after identity change", len(stale))
    return True
