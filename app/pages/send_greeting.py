"""
app/pages/send_greeting.py

Share a photo and a short message with family.
"""

from __future__ import annotations

import time

import streamlit as st

from app.session import GREETING_DRAFT_KEY, ScreenContext
from app.ui import card_close, card_open
from pipelines import greetings
from pipelines.greetings import GreetingDraft, GreetingStep
from pipelines.navigation import View
from pipelines.photos import photo_data_uri

_SEND_DELAY_S = 1.5


def _set(draft: GreetingDraft) -> None:
    st.session_state[GREETING_DRAFT_KEY] = draft


def render(ctx: ScreenContext) -> None:
    draft: GreetingDraft = st.session_state.get(GREETING_DRAFT_KEY) or GreetingDraft()

    if st.button("← Back"):
        prev = greetings.back(draft)
        if prev is None:
            _set(greetings.reset())
            ctx.navigate(View.RESIDENT_HOME)
        else:
            _set(prev)
            ctx.rerun()

    st.title("Send a Greeting")

    if draft.step == GreetingStep.INITIAL:
        card_open("Pick a photo", "Share a smile by taking a new photo or choosing one from your gallery.")
        photo = st.file_uploader("Choose a photo", type=["png", "jpg", "jpeg"])
        card_close()
        if photo is not None:
            uri = photo_data_uri(photo.getvalue(), max_side=1024)
            if uri is None:
                st.error("That file could not be read as a photo.")
                return
            _set(greetings.choose_photo(draft, photo.name, uri))
            ctx.rerun()

    elif draft.step == GreetingStep.PREVIEW:
        st.image(draft.photo_url, use_container_width=True)
        message = st.text_area("Add a message (optional)", placeholder="e.g., Thinking of you!")
        left, right = st.columns(2)
        with left:
            if st.button("Choose a different photo", use_container_width=True):
                _set(greetings.reset())
                ctx.rerun()
        with right:
            if st.button("Send Greeting", type="primary", use_container_width=True):
                _set(greetings.start_sending(draft, message))
                ctx.rerun()

    elif draft.step == GreetingStep.SENDING:
        with st.spinner("Sending your greeting..."):
            time.sleep(_SEND_DELAY_S)
        user = ctx.current_user
        _set(greetings.finish_sending(draft, user.resident_id if user else "unknown"))
        ctx.rerun()

    else:
        st.success("Your greeting is on its way! 💌")
        if st.button("Back to Home", type="primary"):
            _set(greetings.reset())
            ctx.navigate(View.RESIDENT_HOME)
