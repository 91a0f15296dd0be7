"""
app/pages/prompts_list.py

Life Stories: pick a question by category, ask the assistant for a fresh
idea, or write your own question and start recording with it.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.session import FRESH_PROMPTS_KEY, PROMPTS_CATEGORY_KEY, ScreenContext
from app.ui import card_close, card_open
from pipelines.assistant import generate_prompt_question
from pipelines.navigation import View
from pipelines.postprocess import AssistantError
from pipelines.prompts import (
    FRESH_IDEAS_CATEGORY,
    MIN_CUSTOM_QUESTION_LEN,
    custom_prompt_draft,
    group_by_category,
)
from storage.models import Prompt, RecordingType

logger = logging.getLogger(__name__)


def _start_recording(ctx: ScreenContext, question: str) -> None:
    ctx.navigate(View.RECORDING, {"recording_type": RecordingType.life_story, "prompt": question})


def _custom_question_form(ctx: ScreenContext, categories: list[str]) -> None:
    card_open("Ask your own question", "What would you like to talk about?")
    with st.form("custom_question"):
        question = st.text_area(
            "Your question",
            placeholder="For example: Tell me about the day I was born...",
            height=120,
        )
        category = st.selectbox(
            "Category",
            options=categories + ["Other (type below)"],
            index=0 if categories else None,
        )
        other = st.text_input("New category", placeholder="For example: Family & Relationships")
        submitted = st.form_submit_button("Save and Start Recording", type="primary")
    card_close()

    if not submitted:
        return

    chosen = other if (category is None or category.startswith("Other")) else category
    draft = custom_prompt_draft(question, chosen or "")
    if draft is None:
        st.error(
            f"Please write a question of at least {MIN_CUSTOM_QUESTION_LEN} characters "
            "and choose a category."
        )
        return
    prompt = ctx.data.add_prompt(draft)
    _start_recording(ctx, prompt.question)


def render(ctx: ScreenContext) -> None:
    if st.button("← Back"):
        ctx.navigate(View.RESIDENT_HOME)
    st.title("Life Stories")
    st.caption("Choose a question to answer on video.")

    # Assistant ideas live for this session only; they are not added to the library.
    fresh: list[Prompt] = st.session_state.setdefault(FRESH_PROMPTS_KEY, [])
    grouped = group_by_category([*ctx.data.prompts, *fresh])
    categories = list(grouped.keys())

    if categories:
        current = st.session_state.get(PROMPTS_CATEGORY_KEY)
        idx = categories.index(current) if current in categories else 0
        picked = st.radio("Category", options=categories, index=idx, horizontal=True)
        st.session_state[PROMPTS_CATEGORY_KEY] = picked

        for i, prompt in enumerate(grouped[picked]):
            if st.button(prompt.question, key=f"prompt_{picked}_{i}", use_container_width=True):
                _start_recording(ctx, prompt.question)
    else:
        st.info("No questions yet. Ask your own below.")

    st.divider()
    left, right = st.columns(2, gap="large")

    with left:
        card_open("Need inspiration?", "Get a brand-new question.")
        if st.button("✨ Suggest a question", use_container_width=True):
            with st.spinner("Thinking of a question..."):
                try:
                    question = generate_prompt_question(demo_mode=ctx.demo_mode, seed=len(fresh))
                except AssistantError as exc:
                    st.error(f"Could not generate a new prompt. Please try again. ({exc})")
                else:
                    fresh.append(
                        Prompt(
                            prompt_id=ctx.data.ids.new_id("AI"),
                            category=FRESH_IDEAS_CATEGORY,
                            question=question,
                        )
                    )
                    st.session_state[PROMPTS_CATEGORY_KEY] = FRESH_IDEAS_CATEGORY
                    ctx.rerun()
        card_close()

    with right:
        _custom_question_form(ctx, [c for c in categories if c != FRESH_IDEAS_CATEGORY])
