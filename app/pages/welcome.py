"""
app/pages/welcome.py

Landing screen: sign in with an existing profile or create one.
"""

from __future__ import annotations

import streamlit as st

from app.session import ScreenContext
from pipelines.navigation import View


def render(ctx: ScreenContext) -> None:
    st.markdown("<div style='height:48px'></div>", unsafe_allow_html=True)
    _, mid, _ = st.columns([1, 1.4, 1])

    with mid:
        st.markdown(
            """
<div style="text-align:center;">
  <div style="font-size:64px;">🎥</div>
  <div style="font-weight:900; font-size:44px;">The Legacy Booth</div>
  <div class="lb-sub" style="font-size:20px; margin-top:8px;">
    Your digital keepsake for life's most precious stories and memories.
  </div>
</div>
            """,
            unsafe_allow_html=True,
        )
        st.markdown("<div style='height:28px'></div>", unsafe_allow_html=True)

        if st.button("Sign In", type="primary", use_container_width=True):
            ctx.navigate(View.LOGIN)
        if st.button("Create Account", use_container_width=True):
            ctx.navigate(View.SIGN_UP)
