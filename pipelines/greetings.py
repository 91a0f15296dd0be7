"""
pipelines/greetings.py

Photo greeting flow: INITIAL -> PREVIEW -> SENDING -> CONFIRMATION.

Sending is a hand-off stub: the greeting is logged, nothing leaves the server.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class GreetingStep(str, Enum):
    INITIAL = "INITIAL"
    PREVIEW = "PREVIEW"
    SENDING = "SENDING"
    CONFIRMATION = "CONFIRMATION"


@dataclass(frozen=True)
class GreetingDraft:
    step: GreetingStep = GreetingStep.INITIAL
    photo_name: Optional[str] = None
    photo_url: Optional[str] = None
    message: str = ""


def choose_photo(draft: GreetingDraft, name: str, data_uri: str) -> GreetingDraft:
    return replace(draft, step=GreetingStep.PREVIEW, photo_name=name, photo_url=data_uri)


def reset(_: GreetingDraft | None = None) -> GreetingDraft:
    return GreetingDraft()


def back(draft: GreetingDraft) -> Optional[GreetingDraft]:
    """From PREVIEW go back to INITIAL; from anywhere else leave the screen (``None``)."""
    if draft.step == GreetingStep.PREVIEW:
        return reset()
    return None


def start_sending(draft: GreetingDraft, message: str) -> GreetingDraft:
    if draft.step != GreetingStep.PREVIEW or not draft.photo_url:
        return draft
    return replace(draft, step=GreetingStep.SENDING, message=message.strip())


def finish_sending(draft: GreetingDraft, sender_id: str) -> GreetingDraft:
    if draft.step != GreetingStep.SENDING:
        return draft
    logger.info(
        "Greeting from %s: photo=%s message=%r", sender_id, draft.photo_name, draft.message
    )
    return replace(draft, step=GreetingStep.CONFIRMATION)
