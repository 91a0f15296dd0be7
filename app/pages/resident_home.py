"""
app/pages/resident_home.py

Resident portal: four big choices and a sign-out button.
"""

from __future__ import annotations

import streamlit as st

from app.session import ScreenContext
from pipelines.navigation import View
from storage.models import RecordingType


def _home_card(icon: str, title: str, description: str, key: str) -> bool:
    st.markdown(
        f"""
<div class="lb-card" style="text-align:center;">
  <div style="font-size:48px;">{icon}</div>
  <div class="lb-title">{title}</div>
  <div class="lb-sub">{description}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
    return st.button(title, key=key, type="primary", use_container_width=True)


def render(ctx: ScreenContext) -> None:
    user = ctx.current_user
    if user is None:
        return

    head, tail = st.columns([4, 1])
    with head:
        st.title(f"Welcome, {user.name.split(' ')[0]}!")
    with tail:
        if st.button("Sign out", use_container_width=True):
            ctx.logout()

    left, right = st.columns(2, gap="large")
    with left:
        if _home_card("📖", "Life Stories", "Answer questions about your life.", "home_stories"):
            ctx.navigate(View.PROMPTS_LIST)
        if _home_card("📞", "Contact Your Family", "Call or email a loved one.", "home_contact"):
            ctx.navigate(View.CONTACT_FAMILY)
    with right:
        if _home_card("🎥", "Leave a Video Message", "Record a message for loved ones.", "home_message"):
            ctx.navigate(View.RECORDING, {"recording_type": RecordingType.message})
        if _home_card("📷", "Send a Greeting", "Share a photo and a message.", "home_greeting"):
            ctx.navigate(View.SEND_GREETING)

    mine = ctx.data.recordings_for(user.resident_id)
    if mine:
        st.caption(f"You have shared {len(mine)} recording{'s' if len(mine) != 1 else ''} so far.")
