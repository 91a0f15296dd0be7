"""
pipelines/assistant.py

Story assistant used by the prompt list (fresh prompt ideas) and the staff
recording detail (draft transcription + summary).

In demo mode nothing is loaded and canned text comes back, so the app runs
on free hosting. Otherwise the model runner is imported lazily and its
output is cleaned by ``pipelines.postprocess``.
"""

from __future__ import annotations

import logging
from typing import Optional

from pipelines.postprocess import AssistantError, require_text

logger = logging.getLogger(__name__)

PROMPT_IDEA_INSTRUCTION = (
    "You are a creative assistant for a life story project in an assisted living facility. "
    "Generate one, and only one, thought-provoking and gentle question to ask a senior "
    "resident about their life. The question should be suitable for a category like "
    "'Childhood & Youth', 'Career & Life Lessons', or 'Family & Relationships'. "
    "Do not include the category name. Do not wrap the question in quotes."
)

DEMO_PROMPT_IDEAS = (
    "What is a song that always takes you back to a special moment?",
    "Who was a neighbor or teacher that made a difference in your life?",
    "What did a perfect Sunday look like when you were young?",
    "What is the best piece of advice you ever received?",
)


def _run(instruction: str, max_new_tokens: int) -> str:
    from models.story_runner import get_runner

    try:
        return get_runner().generate(instruction, max_new_tokens=max_new_tokens)
    except (OSError, RuntimeError, ValueError) as exc:
        logger.error("Story assistant generation failed: %s", exc)
        raise AssistantError("The story assistant is unavailable right now.") from exc


def generate_prompt_question(demo_mode: bool = True, seed: int = 0) -> str:
    """One new life-story question."""
    if demo_mode:
        return DEMO_PROMPT_IDEAS[seed % len(DEMO_PROMPT_IDEAS)]
    raw = _run(PROMPT_IDEA_INSTRUCTION, max_new_tokens=64)
    return require_text(raw, "question", single_line=True)


def draft_transcription(
    resident_name: Optional[str], prompt: Optional[str], demo_mode: bool = True
) -> str:
    """A plausible first-person transcription for staff to correct against the video."""
    name = resident_name or "a resident"
    topic = prompt or "a personal message"
    if demo_mode:
        return (
            f"[Demo transcription] {name} talks about \"{topic}\". "
            "Replace this text with the words spoken in the video."
        )
    instruction = (
        f"You are a transcription service. A senior resident named {name} is telling a story. "
        f'Based on the prompt "{topic}", generate a plausible, heartfelt transcription from '
        "their perspective. The transcription should be a single block of text."
    )
    return require_text(_run(instruction, max_new_tokens=400), "transcription")


def summarize(text: str, demo_mode: bool = True) -> str:
    """One or two sentences capturing the main sentiment and key points."""
    if not (text or "").strip():
        raise AssistantError("There is no transcription to summarize.")
    if demo_mode:
        words = text.split()
        excerpt = " ".join(words[:25]) + ("..." if len(words) > 25 else "")
        return f"[Demo summary] {excerpt}"
    instruction = (
        "Summarize the following text in one or two sentences, capturing the main sentiment "
        f'and key points. Text: "{text}"'
    )
    return require_text(_run(instruction, max_new_tokens=120), "summary")
