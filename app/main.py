"""
app/main.py

The Legacy Booth: Streamlit entry point.
- Demo Mode toggle (story assistant without a model)
- Per-session services (data, auth, navigator)
- View guards, then exactly one screen per run
- Global theme injection
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.routes import import_render  # noqa: E402
from app.session import ScreenContext, init_session, sync_screen_state  # noqa: E402
from app.ui import inject_theme  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="The Legacy Booth",
    page_icon="🎥",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ---------------------------------------------------------------------------
# Session defaults
# ---------------------------------------------------------------------------
init_session(st.session_state)

data = st.session_state["legacy_data"]
auth = st.session_state["auth"]
navigator = st.session_state["navigator"]

inject_theme()

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.title("🎥 The Legacy Booth")
st.sidebar.markdown("Stories and messages for the people you love.")
st.sidebar.divider()

st.sidebar.toggle(
    "🎬 Demo Mode (no model, hosting-friendly)",
    key="demo_mode",
    help="When enabled, the story assistant returns sample text instead of loading a model.",
)

if auth.current is not None:
    who = auth.current
    st.sidebar.success(f"**{who.name}**\n\n{'Staff' if who.is_staff else 'Resident'}")
    if st.sidebar.button("↩️ Sign out"):
        auth.logout()
        st.rerun()
else:
    st.sidebar.info("Not signed in")

# ---------------------------------------------------------------------------
# View routing
# ---------------------------------------------------------------------------
# Screen state belongs to whoever was signed in when it was written.
sync_screen_state(st.session_state, auth.current)

decision = navigator.resolve(auth.current)
if decision.redirected:
    logger.info(
        "View %s -> %s (%s)",
        decision.redirected_from,
        decision.view.value,
        decision.reason.value,
    )

ctx = ScreenContext(
    data=data,
    auth=auth,
    navigator=navigator,
    rerun=st.rerun,
    view_context=decision.state.context,
    demo_mode=bool(st.session_state.get("demo_mode", True)),
)

import_render(decision.view)(ctx)
