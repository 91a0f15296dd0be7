from pathlib import Path

from app.routes import PAGE_MODULES
from app.session import (
    GREETING_DRAFT_KEY,
    RECORDING_DONE_KEY,
    ScreenContext,
    detail_key,
    init_session,
    sync_screen_state,
)
from pipelines.auth import AuthSession
from pipelines.navigation import Navigator, View
from storage.local_store import LocalStore
from storage.seed import SEED_RESIDENTS

PAGES_DIR = Path(__file__).resolve().parents[1] / "app" / "pages"


def test_every_view_has_a_page_module():
    assert set(PAGE_MODULES) == set(View)
    for module_name in PAGE_MODULES.values():
        assert (PAGES_DIR / f"{module_name}.py").is_file()


def test_init_session_creates_services_once(tmp_path):
    calls = []

    def factory():
        calls.append(1)
        return LocalStore(tmp_path)

    state = {}
    init_session(state, store_factory=factory)
    first = dict(state)
    init_session(state, store_factory=factory)

    assert calls == [1]
    assert state == first
    assert state["demo_mode"] is True
    assert state["auth"].current is None


def _ctx(data):
    reruns = []
    ctx = ScreenContext(
        data=data,
        auth=AuthSession(),
        navigator=Navigator(),
        rerun=lambda: reruns.append(1),
    )
    return ctx, reruns


def test_navigate_updates_navigator_and_reruns(data):
    ctx, reruns = _ctx(data)
    ctx.navigate(View.LOGIN, {"from": "welcome"})

    assert ctx.navigator.state.view == View.LOGIN
    assert ctx.navigator.state.context["from"] == "welcome"
    assert reruns == [1]


def test_login_and_logout_rerun(data):
    ctx, reruns = _ctx(data)
    ctx.login(SEED_RESIDENTS[1])
    assert ctx.current_user == SEED_RESIDENTS[1]

    ctx.logout()
    assert ctx.current_user is None
    assert reruns == [1, 1]


# ---------------------------------------------------------------------------
# Per-user screen state
# ---------------------------------------------------------------------------

def test_next_user_does_not_inherit_previous_users_screen_state():
    first, second = SEED_RESIDENTS[0], SEED_RESIDENTS[1]
    state = {"demo_mode": True}

    sync_screen_state(state, first)
    state[RECORDING_DONE_KEY] = "VID-123"
    state[GREETING_DRAFT_KEY] = "photo left in preview"
    state[detail_key("VID-001", "text")] = "unsaved edit"

    # Sign-out from the sidebar, then the next resident signs in.
    assert sync_screen_state(state, None) is True
    sync_screen_state(state, second)

    assert RECORDING_DONE_KEY not in state
    assert GREETING_DRAFT_KEY not in state
    assert detail_key("VID-001", "text") not in state
    assert state["demo_mode"] is True


def test_switching_user_without_sign_out_also_clears():
    state = {}
    sync_screen_state(state, SEED_RESIDENTS[0])
    state[RECORDING_DONE_KEY] = "VID-123"

    assert sync_screen_state(state, SEED_RESIDENTS[1]) is True
    assert RECORDING_DONE_KEY not in state


def test_same_user_keeps_screen_state():
    state = {}
    sync_screen_state(state, SEED_RESIDENTS[0])
    state[RECORDING_DONE_KEY] = "VID-123"

    assert sync_screen_state(state, SEED_RESIDENTS[0]) is False
    assert state[RECORDING_DONE_KEY] == "VID-123"
