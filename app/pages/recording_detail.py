"""
app/pages/recording_detail.py

Staff review of one recording (payload ``{"recording_id": ...}``):
- watch the video, read the prompt
- draft transcription + summary with the story assistant
- edit status / transcription / notes, then save
- export the resident's legacy book (JSON / PDF)

Edits live in session-state keys scoped to the recording until "Save
Changes" hands a copy to ``update_recording``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

from app.session import ScreenContext, detail_key
from app.ui import card_close, card_open, prompt_quote, status_badge
from pipelines.assistant import draft_transcription, summarize
from pipelines.navigation import View
from pipelines.postprocess import AssistantError
from storage.export import export_json, export_pdf
from storage.models import Recording, TranscriptionStatus

logger = logging.getLogger(__name__)

_STATUSES = [s.value for s in TranscriptionStatus]


def _keys(recording_id: str) -> dict[str, str]:
    return {f: detail_key(recording_id, f) for f in ("status", "text", "notes", "summary", "error", "pdf")}


def _seed_edit_state(rec: Recording, keys: dict[str, str]) -> None:
    st.session_state.setdefault(keys["status"], rec.transcription_status.value)
    st.session_state.setdefault(keys["text"], rec.transcription_text)
    st.session_state.setdefault(keys["notes"], rec.notes)
    st.session_state.setdefault(keys["summary"], rec.ai_summary)


def _clear_edit_state(keys: dict[str, str]) -> None:
    for k in keys.values():
        st.session_state.pop(k, None)


def _generate(ctx: ScreenContext, rec: Recording, keys: dict[str, str]) -> None:
    """Button callback: runs before widgets are drawn, so it may set their values."""
    resident = ctx.data.get_resident_by_id(rec.resident_id)
    try:
        text = draft_transcription(
            resident.name if resident else None, rec.associated_prompt, demo_mode=ctx.demo_mode
        )
        summary = summarize(text, demo_mode=ctx.demo_mode)
    except AssistantError as exc:
        logger.error("AI content generation failed for %s: %s", rec.recording_id, exc)
        st.session_state[keys["error"]] = "AI content generation failed. Please try again."
        return

    st.session_state[keys["text"]] = text
    st.session_state[keys["summary"]] = summary
    st.session_state[keys["status"]] = TranscriptionStatus.complete.value
    st.session_state[keys["error"]] = None


def _export_panel(ctx: ScreenContext, rec: Recording, keys: dict[str, str]) -> None:
    card_open("Legacy book", "Everything this resident has recorded, in one document.")
    book_json = export_json(ctx.data, rec.resident_id)
    if book_json is None:
        st.caption("This recording's resident is not on file, so no book can be made.")
        card_close()
        return

    st.download_button(
        "Download JSON",
        data=book_json,
        file_name=f"legacy_book_{rec.resident_id}.json",
        mime="application/json",
        use_container_width=True,
    )
    if st.button("Prepare PDF", use_container_width=True):
        try:
            st.session_state[keys["pdf"]] = export_pdf(ctx.data, rec.resident_id)
        except ImportError as exc:
            st.error(str(exc))
    pdf = st.session_state.get(keys["pdf"])
    if pdf:
        st.download_button(
            "Download PDF",
            data=pdf,
            file_name=f"legacy_book_{rec.resident_id}.pdf",
            mime="application/pdf",
            use_container_width=True,
        )
    card_close()


def render(ctx: ScreenContext) -> None:
    recording_id = ctx.view_context.get("recording_id")
    if not recording_id:
        ctx.navigate(View.STAFF_HOME)
        return

    rec = ctx.data.get_recording_by_id(recording_id)
    keys = _keys(recording_id)
    if st.button("← Back to Dashboard"):
        _clear_edit_state(keys)
        ctx.navigate(View.STAFF_HOME)

    if rec is None:
        st.title("Recording Details")
        st.warning(f"Recording {recording_id} was not found.")
        return

    _seed_edit_state(rec, keys)

    resident = ctx.data.get_resident_by_id(rec.resident_id)
    st.title(f"{rec.recording_type.value} from {resident.name if resident else 'Unknown resident'}")
    st.caption(f"{rec.recording_id} · recorded {rec.timestamp.strftime('%d %b %Y %H:%M')}")

    left, right = st.columns([1.1, 1], gap="large")

    with left:
        card_open("Video", rec.video_file.name)
        if rec.video_file.url and Path(rec.video_file.url).is_file():
            st.video(rec.video_file.url)
        else:
            st.caption("Video file is not available on this server.")
        card_close()

        if rec.associated_prompt:
            prompt_quote(rec.associated_prompt)

        card_open("AI assistant", "Draft a transcript and summary to review.")
        st.button(
            "Generate Transcript & Summary",
            on_click=_generate,
            args=(ctx, rec, keys),
            use_container_width=True,
        )
        if st.session_state.get(keys["error"]):
            st.error(st.session_state[keys["error"]])
        elif st.session_state.get(keys["summary"]):
            st.markdown("**AI summary**")
            st.write(st.session_state[keys["summary"]])
        card_close()

        _export_panel(ctx, rec, keys)

    with right:
        card_open("Transcription")
        st.markdown(status_badge(st.session_state[keys["status"]]), unsafe_allow_html=True)
        st.selectbox("Status", options=_STATUSES, key=keys["status"])
        st.text_area(
            "Transcription text",
            key=keys["text"],
            height=300,
            placeholder="Generate with AI or paste the full text of the transcription here...",
        )
        st.text_area("Staff notes", key=keys["notes"], height=120, placeholder="Add any internal notes...")
        save = st.button("Save Changes", type="primary", use_container_width=True)
        card_close()

    if save:
        updated = rec.model_copy(
            update={
                "transcription_status": TranscriptionStatus(st.session_state[keys["status"]]),
                "transcription_text": st.session_state[keys["text"]],
                "notes": st.session_state[keys["notes"]],
                "ai_summary": st.session_state[keys["summary"]] or "",
            }
        )
        ctx.data.update_recording(updated)
        _clear_edit_state(keys)
        ctx.navigate(View.STAFF_HOME)
