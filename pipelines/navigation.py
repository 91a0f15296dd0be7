"""
pipelines/navigation.py

Single-page view state machine (no URL router).

- ``Navigator.navigate(view, context)`` swaps view + payload in one step
- ``Navigator.resolve(resident)`` runs the guards on every render and returns
  a ``RouteDecision`` saying which view to draw and, when the requested view
  was rejected, why

Guards, in order:
1. Authenticated identity changed since the last render -> role home
2. Anonymous -> only WELCOME / LOGIN / SIGN_UP, anything else -> WELCOME
3. Authenticated but the view is not one of the role's screens -> role home
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from storage.models import Resident

logger = logging.getLogger(__name__)


class View(str, Enum):
    WELCOME = "WELCOME"
    SIGN_UP = "SIGN_UP"
    LOGIN = "LOGIN"
    RESIDENT_HOME = "RESIDENT_HOME"
    PROMPTS_LIST = "PROMPTS_LIST"
    RECORDING = "RECORDING"
    STAFF_HOME = "STAFF_HOME"
    STAFF_RECORDING_DETAIL = "STAFF_RECORDING_DETAIL"
    STAFF_MANAGE_PROMPTS = "STAFF_MANAGE_PROMPTS"
    CONTACT_FAMILY = "CONTACT_FAMILY"
    SEND_GREETING = "SEND_GREETING"


PUBLIC_VIEWS = frozenset({View.WELCOME, View.LOGIN, View.SIGN_UP})
RESIDENT_VIEWS = frozenset(
    {
        View.RESIDENT_HOME,
        View.PROMPTS_LIST,
        View.RECORDING,
        View.CONTACT_FAMILY,
        View.SEND_GREETING,
    }
)
STAFF_VIEWS = frozenset({View.STAFF_HOME, View.STAFF_RECORDING_DETAIL, View.STAFF_MANAGE_PROMPTS})

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class RedirectReason(str, Enum):
    identity_changed = "identity_changed"
    not_signed_in = "not_signed_in"
    invalid_view = "invalid_view"


@dataclass(frozen=True)
class ViewState:
    # A str here means a view name that is not in the View enum.
    view: Union[View, str] = View.WELCOME
    context: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)


@dataclass(frozen=True)
class RouteDecision:
    state: ViewState
    redirected_from: Union[View, str, None] = None
    reason: Optional[RedirectReason] = None

    @property
    def view(self) -> View:
        return self.state.view  # type: ignore[return-value]

    @property
    def redirected(self) -> bool:
        return self.reason is not None


def coerce_view(view: Union[View, str]) -> Union[View, str]:
    """Map a view name to the enum member; unknown names pass through as str."""
    if isinstance(view, View):
        return view
    try:
        return View(view)
    except ValueError:
        return view


def home_for(resident: Resident) -> View:
    return View.STAFF_HOME if resident.is_staff else View.RESIDENT_HOME


def allowed_views(resident: Optional[Resident]) -> frozenset:
    if resident is None:
        return PUBLIC_VIEWS
    return STAFF_VIEWS if resident.is_staff else RESIDENT_VIEWS


class Navigator:
    def __init__(self, initial: Optional[ViewState] = None) -> None:
        self._state = initial or ViewState()
        self._identity: Optional[str] = None

    @property
    def state(self) -> ViewState:
        return self._state

    def navigate(self, view: Union[View, str], context: Optional[Mapping[str, Any]] = None) -> None:
        self._state = ViewState(
            view=coerce_view(view),
            context=MappingProxyType(dict(context)) if context else _EMPTY,
        )

    def resolve(self, resident: Optional[Resident]) -> RouteDecision:
        identity = resident.resident_id if resident is not None else None
        if identity != self._identity:
            self._identity = identity
            if resident is not None:
                return self._redirect(home_for(resident), RedirectReason.identity_changed)

        if self._state.view in allowed_views(resident):
            return RouteDecision(state=self._state)

        if resident is None:
            return self._redirect(View.WELCOME, RedirectReason.not_signed_in)
        return self._redirect(home_for(resident), RedirectReason.invalid_view)

    def _redirect(self, target: View, reason: RedirectReason) -> RouteDecision:
        requested = self._state.view
        self._state = ViewState(view=target)
        if requested != target:
            logger.debug("Route %s -> %s (%s)", requested, target, reason.value)
        return RouteDecision(state=self._state, redirected_from=requested, reason=reason)
