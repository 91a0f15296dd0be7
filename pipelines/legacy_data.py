"""
pipelines/legacy_data.py

Session source of truth for residents, prompts and recordings.

- Loads each collection from its own storage slot, seeded with sample data
- Every mutator replaces the collection, then persists exactly that slot
- Lookups never raise: an unknown id is ``None`` (or a no-op for updates)

Storage failures degrade to session-only data: the in-memory collections keep
the change until the app reloads, then the last saved snapshot comes back.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from pipelines.ids import IdFactory
from storage.local_store import PROMPTS_KEY, RECORDINGS_KEY, RESIDENTS_KEY, LocalStore
from storage.models import (
    Prompt,
    PromptDraft,
    Recording,
    RecordingDraft,
    Resident,
    ResidentDraft,
)
from storage.seed import SEED_PROMPTS, SEED_RESIDENTS, seed_recordings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Distinguishes "slot missing/unreadable" from a stored empty array.
_ABSENT: list = []


class LegacyData:
    def __init__(
        self,
        store: LocalStore,
        ids: Optional[IdFactory] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.ids = ids or IdFactory()
        self._now = now

        self._residents: tuple[Resident, ...] = self._load_slot(
            RESIDENTS_KEY, Resident, SEED_RESIDENTS
        )
        self._prompts: tuple[Prompt, ...] = self._load_slot(PROMPTS_KEY, Prompt, SEED_PROMPTS)
        self._recordings: tuple[Recording, ...] = self._load_slot(
            RECORDINGS_KEY, Recording, seed_recordings(now())
        )

    # -------------------------
    # Load / persist
    # -------------------------
    def _load_slot(self, key: str, model: type[M], seed: Sequence[M]) -> tuple[M, ...]:
        raw = self.store.load(key, _ABSENT)
        if raw is _ABSENT:
            return tuple(seed)
        try:
            return tuple(TypeAdapter(list[model]).validate_python(raw))
        except ValidationError as exc:
            logger.warning(
                "Stored %r items failed validation (%d errors); using seed data.",
                key,
                exc.error_count(),
            )
            return tuple(seed)

    def _persist(self, key: str, items: Sequence[BaseModel]) -> None:
        self.store.save(key, [i.model_dump(mode="json") for i in items])

    # -------------------------
    # Read access
    # -------------------------
    @property
    def residents(self) -> tuple[Resident, ...]:
        return self._residents

    @property
    def prompts(self) -> tuple[Prompt, ...]:
        return self._prompts

    @property
    def recordings(self) -> tuple[Recording, ...]:
        return self._recordings

    def get_resident_by_id(self, resident_id: str) -> Optional[Resident]:
        # Seed residents stay resolvable even if the stored collection replaced them.
        for r in (*self._residents, *SEED_RESIDENTS):
            if r.resident_id == resident_id:
                return r
        return None

    def get_recording_by_id(self, recording_id: str) -> Optional[Recording]:
        return next((r for r in self._recordings if r.recording_id == recording_id), None)

    def recordings_for(self, resident_id: str) -> list[Recording]:
        return [r for r in self._recordings if r.resident_id == resident_id]

    # -------------------------
    # Mutators
    # -------------------------
    def add_resident(self, draft: ResidentDraft) -> Resident:
        resident = Resident(
            **draft.model_dump(),
            resident_id=self.ids.new_id("RES"),
            is_staff=False,
        )
        self._residents = (resident, *self._residents)
        self._persist(RESIDENTS_KEY, self._residents)
        logger.info("Added resident %s", resident.resident_id)
        return resident

    def add_recording(self, draft: RecordingDraft) -> Recording:
        recording = Recording(
            **draft.model_dump(),
            recording_id=self.ids.new_id("VID"),
            timestamp=self._now(),
            ai_summary="",
        )
        self._recordings = (recording, *self._recordings)
        self._persist(RECORDINGS_KEY, self._recordings)
        logger.info(
            "Added recording %s for resident %s", recording.recording_id, recording.resident_id
        )
        return recording

    def update_recording(self, updated: Recording) -> None:
        if not any(r.recording_id == updated.recording_id for r in self._recordings):
            logger.debug("update_recording: unknown id %s ignored", updated.recording_id)
            return
        self._recordings = tuple(
            updated if r.recording_id == updated.recording_id else r for r in self._recordings
        )
        self._persist(RECORDINGS_KEY, self._recordings)

    def add_prompt(self, draft: PromptDraft) -> Prompt:
        prompt = Prompt(**draft.model_dump(), prompt_id=self.ids.new_id("P"))
        self._prompts = (prompt, *self._prompts)
        self._persist(PROMPTS_KEY, self._prompts)
        return prompt
