"""
app/pages/recording.py

Record / upload a video for a Life Story (with its question) or a Message.
Expects the view payload ``{"recording_type": ..., "prompt": <question>?}``.
"""

from __future__ import annotations

import streamlit as st

from app.session import RECORDING_DONE_KEY, ScreenContext
from app.ui import card_close, card_open, prompt_quote
from pipelines.navigation import View
from storage.media import save_media
from storage.models import RecordingDraft, RecordingType, TranscriptionStatus


def _back_view(recording_type) -> View:
    return View.PROMPTS_LIST if recording_type == RecordingType.life_story else View.RESIDENT_HOME


def render(ctx: ScreenContext) -> None:
    user = ctx.current_user
    raw_type = ctx.view_context.get("recording_type")
    if raw_type is None or user is None:
        ctx.navigate(View.RESIDENT_HOME)
        return

    recording_type = RecordingType(raw_type)
    prompt = ctx.view_context.get("prompt")
    back = _back_view(recording_type)

    done = st.session_state.get(RECORDING_DONE_KEY)
    if done:
        st.title("Thank you!")
        st.success("Your video was submitted. Our staff will take care of it from here.")
        submitted = ctx.data.get_recording_by_id(done)
        if submitted is not None and not submitted.video_file.url:
            st.warning("The video file could not be saved; staff will only see its name.")
        if st.button("Back to Home", type="primary"):
            st.session_state[RECORDING_DONE_KEY] = None
            ctx.navigate(View.RESIDENT_HOME)
        return

    if st.button("← Back"):
        ctx.navigate(back)

    st.title("Record Your Story" if recording_type == RecordingType.life_story else "Leave a Message")
    if prompt:
        prompt_quote(prompt)

    card_open("Your video", "Record on your device, then choose the file here.")
    video = st.file_uploader(
        "Choose a video",
        type=["mp4", "mov", "webm", "m4v"],
        help="Record with your camera app, then pick it from your gallery.",
    )
    if video is not None:
        st.caption(f"Ready to upload: {video.name}")
    submit = st.button(
        "Submit Your Video",
        type="primary",
        disabled=video is None,
        use_container_width=True,
    )
    card_close()

    if not submit or video is None:
        return

    with st.spinner("Submitting..."):
        stamp = str(ctx.data.ids.next_stamp())
        video_ref = save_media(video.name, video.getvalue(), stamp)
        recording = ctx.data.add_recording(
            RecordingDraft(
                resident_id=user.resident_id,
                recording_type=recording_type,
                associated_prompt=prompt,
                video_file=video_ref,
                transcription_status=TranscriptionStatus.pending,
            )
        )

    st.session_state[RECORDING_DONE_KEY] = recording.recording_id
    ctx.rerun()
