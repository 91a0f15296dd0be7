"""
app/pages/contact_family.py

Call or email the resident's family contact.
"""

from __future__ import annotations

import re

import streamlit as st

from app.session import ScreenContext
from app.ui import avatar_html
from pipelines.navigation import View


def _tel_href(phone: str) -> str:
    return "tel:" + re.sub(r"[^0-9+]", "", phone)


def render(ctx: ScreenContext) -> None:
    if st.button("← Back"):
        ctx.navigate(View.RESIDENT_HOME)
    st.title("Contact Your Family")

    user = ctx.current_user
    if user is None or user.is_staff or not user.family_contact_name:
        st.info("There is no family contact on file yet. Please ask a staff member to add one.")
        return

    _, mid, _ = st.columns([1, 1.4, 1])
    with mid:
        # Family contacts don't have stored photos.
        st.markdown(avatar_html(user.family_contact_name, None, size=120), unsafe_allow_html=True)
        st.subheader(user.family_contact_name)
        if user.family_contact_phone:
            st.caption(user.family_contact_phone)
            st.link_button(
                f"📞 Call {user.family_contact_name.split(' ')[0]}",
                _tel_href(user.family_contact_phone),
                type="primary",
                use_container_width=True,
            )
        if user.family_contact_email:
            st.caption(user.family_contact_email)
            st.link_button(
                "✉️ Send an Email",
                f"mailto:{user.family_contact_email}",
                use_container_width=True,
            )
