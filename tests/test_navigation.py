import pytest

from pipelines.auth import AuthSession
from pipelines.navigation import (
    PUBLIC_VIEWS,
    Navigator,
    RedirectReason,
    View,
    ViewState,
    allowed_views,
    coerce_view,
    home_for,
)
from storage.seed import SEED_RESIDENTS

RESIDENT, OTHER_RESIDENT, STAFF = SEED_RESIDENTS


@pytest.fixture
def nav():
    return Navigator()


def _signed_in(nav, who):
    # First render after login always lands on the role home.
    decision = nav.resolve(who)
    assert decision.reason == RedirectReason.identity_changed
    return decision


def test_starts_on_welcome(nav):
    decision = nav.resolve(None)
    assert decision.view == View.WELCOME
    assert not decision.redirected
    assert dict(decision.state.context) == {}


def test_anonymous_may_open_public_views(nav):
    for view in PUBLIC_VIEWS:
        nav.navigate(view)
        assert nav.resolve(None).view == view


def test_anonymous_protected_view_redirects_to_welcome(nav):
    nav.navigate(View.STAFF_HOME, {"x": 1})
    decision = nav.resolve(None)

    assert decision.view == View.WELCOME
    assert decision.reason == RedirectReason.not_signed_in
    assert decision.redirected_from == View.STAFF_HOME
    assert dict(decision.state.context) == {}


def test_login_lands_on_resident_home(nav):
    nav.navigate(View.LOGIN)
    decision = _signed_in(nav, RESIDENT)
    assert decision.view == View.RESIDENT_HOME
    assert decision.redirected_from == View.LOGIN


def test_staff_login_lands_on_staff_home(nav):
    assert _signed_in(nav, STAFF).view == View.STAFF_HOME


def test_navigate_replaces_view_and_context_together(nav):
    _signed_in(nav, RESIDENT)
    nav.navigate(View.RECORDING, {"recording_type": "Message"})

    decision = nav.resolve(RESIDENT)
    assert decision.view == View.RECORDING
    assert decision.state.context["recording_type"] == "Message"
    assert not decision.redirected

    nav.navigate(View.RESIDENT_HOME)
    assert dict(nav.resolve(RESIDENT).state.context) == {}


def test_context_is_read_only_and_detached_from_caller(nav):
    payload = {"recording_id": "VID-001"}
    nav.navigate(View.STAFF_RECORDING_DETAIL, payload)
    payload["recording_id"] = "changed"

    assert nav.state.context["recording_id"] == "VID-001"
    with pytest.raises(TypeError):
        nav.state.context["recording_id"] = "x"  # type: ignore[index]


def test_resident_cannot_open_staff_views(nav):
    _signed_in(nav, RESIDENT)
    nav.navigate(View.STAFF_RECORDING_DETAIL, {"recording_id": "VID-001"})

    decision = nav.resolve(RESIDENT)
    assert decision.view == View.RESIDENT_HOME
    assert decision.reason == RedirectReason.invalid_view


def test_staff_cannot_open_resident_views(nav):
    _signed_in(nav, STAFF)
    nav.navigate(View.RESIDENT_HOME)
    assert nav.resolve(STAFF).view == View.STAFF_HOME


def test_signed_in_user_on_public_view_goes_home(nav):
    _signed_in(nav, RESIDENT)
    nav.navigate(View.WELCOME)
    decision = nav.resolve(RESIDENT)
    assert decision.view == View.RESIDENT_HOME
    assert decision.reason == RedirectReason.invalid_view


def test_unknown_view_name_goes_home(nav):
    _signed_in(nav, STAFF)
    nav.navigate("NOT_A_VIEW")
    assert nav.state.view == "NOT_A_VIEW"
    assert nav.resolve(STAFF).view == View.STAFF_HOME


def test_switching_user_redirects_to_new_home(nav):
    _signed_in(nav, RESIDENT)
    nav.navigate(View.PROMPTS_LIST)

    decision = nav.resolve(OTHER_RESIDENT)
    assert decision.view == View.RESIDENT_HOME
    assert decision.reason == RedirectReason.identity_changed


def test_logout_returns_to_welcome(nav):
    auth = AuthSession()
    auth.login(RESIDENT)
    _signed_in(nav, auth.current)
    nav.navigate(View.CONTACT_FAMILY)

    auth.logout()
    decision = nav.resolve(auth.current)
    assert decision.view == View.WELCOME
    assert decision.reason == RedirectReason.not_signed_in


def test_initial_state_can_be_injected():
    nav = Navigator(ViewState(view=View.LOGIN))
    assert nav.resolve(None).view == View.LOGIN


def test_helpers():
    assert coerce_view("STAFF_HOME") is View.STAFF_HOME
    assert coerce_view("nope") == "nope"
    assert home_for(RESIDENT) == View.RESIDENT_HOME
    assert home_for(STAFF) == View.STAFF_HOME
    assert allowed_views(None) == PUBLIC_VIEWS
    assert View.SEND_GREETING in allowed_views(RESIDENT)
    assert View.SEND_GREETING not in allowed_views(STAFF)
