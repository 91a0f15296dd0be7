"""
app/pages/login.py

"Who are you?": pick a resident or staff profile. No password in this build.
"""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from app.session import ScreenContext
from app.ui import avatar_html
from pipelines.navigation import View
from storage.models import Resident

_COLUMNS = 3


def _profile_grid(ctx: ScreenContext, people: Sequence[Resident], key_prefix: str) -> None:
    cols = st.columns(_COLUMNS, gap="medium")
    for i, person in enumerate(people):
        with cols[i % _COLUMNS]:
            st.markdown(avatar_html(person.name, person.photo_url), unsafe_allow_html=True)
            if st.button(person.name, key=f"{key_prefix}_{person.resident_id}", use_container_width=True):
                ctx.login(person)


def render(ctx: ScreenContext) -> None:
    st.title("Who are you?")
    st.caption("Tap your picture to sign in.")

    residents = [r for r in ctx.data.residents if not r.is_staff]
    staff = [r for r in ctx.data.residents if r.is_staff]

    if residents:
        _profile_grid(ctx, residents, "res")

    if staff:
        st.divider()
        st.subheader("Staff")
        _profile_grid(ctx, staff, "staff")

    st.divider()
    st.markdown("Don't see your profile?")
    left, right = st.columns(2)
    with left:
        if st.button("Create an account", type="primary", use_container_width=True):
            ctx.navigate(View.SIGN_UP)
    with right:
        if st.button("Back to Welcome", use_container_width=True):
            ctx.navigate(View.WELCOME)
