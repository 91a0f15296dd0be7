"""
pipelines/prompts.py

Prompt helpers shared by the resident prompt list and the staff prompt manager.
"""

from __future__ import annotations

from typing import Iterable, Optional

from storage.models import Prompt, PromptDraft

FRESH_IDEAS_CATEGORY = "Fresh Ideas"
MIN_CUSTOM_QUESTION_LEN = 5


def group_by_category(prompts: Iterable[Prompt], sort: bool = False) -> dict[str, list[Prompt]]:
    """Group prompts by category, keeping first-seen order unless *sort* is set."""
    grouped: dict[str, list[Prompt]] = {}
    for p in prompts:
        grouped.setdefault(p.category, []).append(p)
    if sort:
        return dict(sorted(grouped.items(), key=lambda kv: kv[0].lower()))
    return grouped


def custom_prompt_draft(question: str, category: str) -> Optional[PromptDraft]:
    """A resident's own question: at least 5 characters and a category, after trimming."""
    q, c = (question or "").strip(), (category or "").strip()
    if len(q) < MIN_CUSTOM_QUESTION_LEN or not c:
        return None
    return PromptDraft(question=q, category=c)


def staff_prompt_draft(question: str, category: str) -> Optional[PromptDraft]:
    q, c = (question or "").strip(), (category or "").strip()
    if not q or not c:
        return None
    return PromptDraft(question=q, category=c)
