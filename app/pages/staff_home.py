"""
app/pages/staff_home.py

Staff dashboard: every submitted recording, newest first, with its resident,
type, date and transcription status.
"""

from __future__ import annotations

import streamlit as st

from app.session import ScreenContext
from app.ui import card_close, card_open, status_badge
from pipelines.navigation import View
from storage.models import TranscriptionStatus

UNKNOWN_RESIDENT = "Unknown resident"


def render(ctx: ScreenContext) -> None:
    head, manage, out = st.columns([3, 1.2, 1])
    with head:
        st.title("Staff Dashboard")
    with manage:
        if st.button("Manage Prompts", use_container_width=True):
            ctx.navigate(View.STAFF_MANAGE_PROMPTS)
    with out:
        if st.button("Sign out", use_container_width=True):
            ctx.logout()

    recordings = ctx.data.recordings
    pending = sum(1 for r in recordings if r.transcription_status != TranscriptionStatus.complete)
    st.caption(f"{len(recordings)} recordings · {pending} awaiting transcription")

    card_open("Submitted Recordings")
    if not recordings:
        st.caption("No recordings have been submitted yet.")
        card_close()
        return

    for rec in sorted(recordings, key=lambda r: r.timestamp, reverse=True):
        resident = ctx.data.get_resident_by_id(rec.resident_id)
        name = resident.name if resident is not None else UNKNOWN_RESIDENT

        c1, c2, c3, c4, c5 = st.columns([2, 1.2, 1.4, 1.2, 1])
        c1.write(name)
        c2.write(rec.recording_type.value)
        c3.write(rec.timestamp.strftime("%d %b %Y %H:%M"))
        c4.markdown(status_badge(rec.transcription_status.value), unsafe_allow_html=True)
        with c5:
            if st.button("View Details", key=f"detail_{rec.recording_id}"):
                ctx.navigate(View.STAFF_RECORDING_DETAIL, {"recording_id": rec.recording_id})
    card_close()
