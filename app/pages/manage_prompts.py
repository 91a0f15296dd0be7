"""
app/pages/manage_prompts.py

Staff prompt library: add a question, browse by category.
"""

from __future__ import annotations

import streamlit as st

from app.session import ScreenContext
from app.ui import card_close, card_open
from pipelines.navigation import View
from pipelines.prompts import group_by_category, staff_prompt_draft


def render(ctx: ScreenContext) -> None:
    if st.button("← Back to Dashboard"):
        ctx.navigate(View.STAFF_HOME)
    st.title("Manage Prompts")

    card_open("Add a new prompt")
    with st.form("add_prompt", clear_on_submit=True):
        question = st.text_area(
            "Question",
            placeholder="e.g., What's a piece of advice you'd give your younger self?",
            height=100,
        )
        category = st.text_input("Category", placeholder="e.g., Career & Life Lessons")
        submitted = st.form_submit_button("Add Prompt", type="primary")
    card_close()

    if submitted:
        draft = staff_prompt_draft(question, category)
        if draft is None:
            st.error("Both a question and a category are required.")
        else:
            ctx.data.add_prompt(draft)
            st.success("Prompt added.")

    grouped = group_by_category(ctx.data.prompts, sort=True)
    st.subheader(f"Prompt library ({len(ctx.data.prompts)})")
    for category_name, prompts in grouped.items():
        with st.expander(f"{category_name} ({len(prompts)})"):
            for p in prompts:
                st.markdown(f"- {p.question}")
