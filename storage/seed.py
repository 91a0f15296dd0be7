"""
storage/seed.py

Built-in sample data used whenever a storage slot is empty or unreadable.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from storage.models import (
    Prompt,
    Recording,
    RecordingType,
    Resident,
    TranscriptionStatus,
    VideoRef,
)

SEED_RESIDENTS: tuple[Resident, ...] = (
    Resident(
        resident_id="RES-001",
        name="Eleanor Vance",
        email="resident1@facility.com",
        family_contact_name="John Vance",
        family_contact_email="vance.family@email.com",
        family_contact_phone="555-123-4567",
    ),
    Resident(
        resident_id="RES-002",
        name="Arthur Pendelton",
        email="resident2@facility.com",
        family_contact_name="Mary Pendelton",
        family_contact_email="pendelton.fam@email.com",
        family_contact_phone="555-987-6543",
    ),
    Resident(
        resident_id="STAFF-001",
        name="Dr. Evelyn Reed",
        email="staff1@facility.com",
        is_staff=True,
    ),
)

SEED_PROMPTS: tuple[Prompt, ...] = (
    Prompt(prompt_id="P-001", category="Childhood & Youth",
           question="What games did you play as a child?"),
    Prompt(prompt_id="P-002", category="Childhood & Youth",
           question="What was your favorite subject in school and why?"),
    Prompt(prompt_id="P-003", category="Career & Life Lessons",
           question="What was your very first job?"),
    Prompt(prompt_id="P-004", category="Career & Life Lessons",
           question="What are you most proud of in your life?"),
    Prompt(prompt_id="P-005", category="Family & Relationships",
           question="How did you meet your spouse or a significant friend?"),
    Prompt(prompt_id="P-006", category="Family & Relationships",
           question="What is one of your fondest memories with your family?"),
)


def seed_recordings(now: datetime | None = None) -> tuple[Recording, ...]:
    """Sample recordings, timestamped relative to *now* (defaults to today)."""
    now = now or datetime.now()
    return (
        Recording(
            recording_id="VID-001",
            timestamp=now - timedelta(days=2),
            resident_id="RES-001",
            recording_type=RecordingType.life_story,
            associated_prompt="What was your proudest moment?",
            video_file=VideoRef(name="proud_moment.mp4", url="#"),
            transcription_status=TranscriptionStatus.complete,
            transcription_text=(
                "I think my proudest moment was watching my daughter graduate from college. "
                "It was a long journey for her, and she worked so hard. Seeing her walk across "
                "that stage, I just felt an overwhelming sense of joy and pride..."
            ),
            ai_summary=(
                "The resident expresses immense pride and joy in witnessing their daughter's "
                "college graduation, highlighting her hard work and the significance of the "
                "achievement."
            ),
            notes="Resident seemed very happy during this recording.",
        ),
        Recording(
            recording_id="VID-002",
            timestamp=now - timedelta(days=1),
            resident_id="RES-002",
            recording_type=RecordingType.message,
            video_file=VideoRef(name="message_to_grandkids.mp4", url="#"),
        ),
    )
