# =========================
# app/ui.py
# =========================
from __future__ import annotations

import html
from typing import Optional

import streamlit as st


def inject_theme() -> None:
    st.markdown(
        """
<style>
/* ============================================================
   Legacy Booth theme
   - Warm dark canvas, large type for older eyes
   - Plum primary, amber accent
   - Transcription status pills (pending / in progress / complete)
   ============================================================ */

/* Hide Streamlit built-in multipage nav (the app has its own view switch) */
[data-testid="stSidebarNav"] { display: none !important; }

:root{
  --primary: 265 35% 42%;          /* plum */
  --accent: 38 92% 55%;            /* amber */
  --canvas: #1E1B26;
  --card: #2A2635;
  --border: rgba(255,255,255,0.10);
  --muted: rgba(255,255,255,0.62);
  --text: rgba(255,255,255,0.94);
}

.stApp { background: var(--canvas); }

.stApp, .stMarkdown, .stMarkdown p, .stCaption, .stText, label,
h1, h2, h3, h4, h5, h6, div[data-testid="stMarkdownContainer"] {
  color: var(--text) !important;
}

html, body, [class*="css"] { font-size: 18px; }

div.block-container {
  padding-top: 2.2rem;
  padding-bottom: 2.2rem;
  max-width: 1100px;
}

/* =========================
   Inputs
   ========================= */
div[data-testid="stTextInput"] input,
div[data-testid="stTextArea"] textarea {
  background: var(--card) !important;
  color: var(--text) !important;
  border: 1px solid var(--border) !important;
  border-radius: 12px !important;
}

/* =========================
   Buttons
   ========================= */
.stButton>button{
  border-radius: 12px;
  min-height: 3rem;
  font-weight: 600;
}
.stButton>button[kind="primary"]{
  background: hsl(var(--primary)) !important;
  border: 1px solid hsl(var(--primary)) !important;
  color: white !important;
}
.stButton>button[kind="secondary"]{
  background: transparent !important;
  color: var(--text) !important;
  border: 1px solid var(--border) !important;
}

/* =========================
   Cards
   ========================= */
.lb-card{
  background: var(--card);
  border: 1px solid var(--border);
  border-radius: 18px;
  padding: 18px;
  margin-bottom: 12px;
}
.lb-title{ font-weight: 800; font-size: 20px; margin-bottom: 2px; color: var(--text); }
.lb-sub{ color: var(--muted); font-size: 15px; }
.lb-prompt{
  border-left: 4px solid hsl(var(--accent));
  padding: 10px 14px;
  font-size: 20px;
  font-style: italic;
}

/* =========================
   Status pills
   ========================= */
.lb-status{
  display:inline-block;
  padding: 4px 10px;
  border-radius: 999px;
  font-size: 13px;
  font-weight: 700;
  border: 1px solid transparent;
}
.lb-status-pending{ background: rgba(180,83,9,0.35); color:#FDE68A; border-color: rgba(245,158,11,0.5); }
.lb-status-progress{ background: rgba(30,64,175,0.35); color:#BFDBFE; border-color: rgba(59,130,246,0.5); }
.lb-status-complete{ background: rgba(22,101,52,0.35); color:#BBF7D0; border-color: rgba(34,197,94,0.5); }

/* =========================
   Avatars
   ========================= */
.lb-avatar{
  border-radius: 999px;
  display:flex; align-items:center; justify-content:center;
  font-weight: 800; color: white; object-fit: cover;
  margin: 0 auto 8px auto;
}
</style>
        """,
        unsafe_allow_html=True,
    )


def _esc(x: str) -> str:
    """Escape any user/DB-provided strings before injecting into HTML."""
    return html.escape(str(x or ""), quote=True)


def card_open(title: str, subtitle: str = "") -> None:
    sub = f'<div class="lb-sub">{_esc(subtitle)}</div>' if subtitle else ""
    st.markdown(
        f'<div class="lb-card"><div class="lb-title">{_esc(title)}</div>{sub}',
        unsafe_allow_html=True,
    )


def card_close() -> None:
    st.markdown("</div>", unsafe_allow_html=True)


def status_badge(status: str) -> str:
    s = (status or "").lower()
    if "complete" in s:
        cls = "lb-status-complete"
    elif "progress" in s:
        cls = "lb-status-progress"
    else:
        cls = "lb-status-pending"
    return f'<span class="lb-status {cls}">{_esc(status)}</span>'


_AVATAR_COLORS = (
    "#EF4444", "#F97316", "#F59E0B", "#EAB308", "#84CC16", "#22C55E", "#10B981",
    "#14B8A6", "#06B6D4", "#0EA5E9", "#3B82F6", "#6366F1", "#8B5CF6", "#A855F7",
    "#D946EF", "#EC4899", "#F43F5E",
)


def _name_color(name: str) -> str:
    h = 0
    for ch in name or "":
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return _AVATAR_COLORS[h % len(_AVATAR_COLORS)]


def avatar_html(name: str, photo_url: Optional[str], size: int = 88) -> str:
    """Photo if present, else a coloured circle with the first initial."""
    style = f"width:{size}px;height:{size}px;"
    if photo_url:
        return f'<img class="lb-avatar" style="{style}" src="{_esc(photo_url)}" alt="{_esc(name)}">'
    initial = (name or "?")[:1].upper()
    return (
        f'<div class="lb-avatar" style="{style}background:{_name_color(name)};'
        f'font-size:{size // 2}px;">{_esc(initial)}</div>'
    )


def prompt_quote(question: str) -> None:
    st.markdown(f'<div class="lb-prompt">“{_esc(question)}”</div>', unsafe_allow_html=True)
