"""
storage/models.py

Pydantic v2 data models for The Legacy Booth state layer.

These models describe the three persisted collections (residents, prompts,
recordings) plus the "draft" shapes screens hand to the data service before
ids and timestamps are assigned. They are frozen: a screen that wants to
change a recording builds a copy with ``model_copy(update=...)`` and passes
it to ``LegacyData.update_recording``.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class RecordingType(str, Enum):
    """What kind of artifact a recording is."""
    life_story = "Life Story"
    message = "Message"


class TranscriptionStatus(str, Enum):
    """Where a recording is in the staff transcription workflow."""
    pending = "Pending"
    in_progress = "In Progress"
    complete = "Complete"


# ---------------------------------------------------------------------------
# Domain models
# ---------------------------------------------------------------------------


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class VideoRef(_Frozen):
    """A persisted video file: original file name plus where it was stored."""
    name: str
    url: str = ""


class ResidentDraft(_Frozen):
    """Sign-up form data; id and staff flag are assigned by the data service."""
    name: str = Field(min_length=1)
    email: str = ""
    photo_url: Optional[str] = Field(
        default=None, description="Data URI of the profile photo, if any."
    )
    family_contact_name: str = ""
    family_contact_email: str = ""
    family_contact_phone: str = ""


class Resident(ResidentDraft):
    """A facility resident or staff member."""
    resident_id: str
    is_staff: bool = False


class PromptDraft(_Frozen):
    category: str
    question: str


class Prompt(PromptDraft):
    """A reusable story-elicitation question."""
    prompt_id: str


class RecordingDraft(_Frozen):
    """A submitted recording before the data service stamps it."""
    resident_id: str
    recording_type: RecordingType
    associated_prompt: Optional[str] = None
    video_file: VideoRef
    transcription_status: TranscriptionStatus = TranscriptionStatus.pending
    transcription_text: str = ""
    notes: str = ""


class Recording(RecordingDraft):
    """A story or message with transcription/annotation metadata."""
    recording_id: str
    timestamp: datetime
    ai_summary: str = ""
