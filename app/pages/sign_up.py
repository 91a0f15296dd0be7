"""
app/pages/sign_up.py

Create a resident profile (name, email, family contact, optional photo) and
sign in as it straight away.
"""

from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from app.session import ScreenContext
from app.ui import avatar_html, card_close, card_open
from pipelines.navigation import View
from pipelines.photos import photo_data_uri
from storage.models import ResidentDraft


def render(ctx: ScreenContext) -> None:
    st.title("Create Your Account")
    if st.button("← Back"):
        ctx.navigate(View.WELCOME)

    with st.form("sign_up"):
        card_open("About you")
        name = st.text_input("Full name")
        email = st.text_input("Email")
        photo = st.file_uploader("Profile photo (optional)", type=["png", "jpg", "jpeg"])
        card_close()

        card_open("Family contact", "Who should we help you reach?")
        family_name = st.text_input("Contact name")
        family_email = st.text_input("Contact email")
        family_phone = st.text_input("Contact phone")
        card_close()

        submitted = st.form_submit_button(
            "Create Account & Sign In", type="primary", use_container_width=True
        )

    photo_url = None
    if photo is not None:
        photo_url = photo_data_uri(photo.getvalue())
        if photo_url is None:
            st.warning("That file could not be read as a photo; it will be skipped.")
        else:
            st.markdown(avatar_html(name or "?", photo_url, size=120), unsafe_allow_html=True)

    if not submitted:
        return

    try:
        draft = ResidentDraft(
            name=name.strip(),
            email=email.strip(),
            photo_url=photo_url,
            family_contact_name=family_name.strip(),
            family_contact_email=family_email.strip(),
            family_contact_phone=family_phone.strip(),
        )
    except ValidationError:
        st.error("Please enter your name.")
        return

    resident = ctx.data.add_resident(draft)
    ctx.login(resident)
