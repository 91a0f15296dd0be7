import json
from datetime import timedelta

import pytest

from pipelines.ids import IdFactory
from pipelines.legacy_data import LegacyData
from storage.export import build_legacy_book, export_json, export_pdf
from storage.models import RecordingDraft, RecordingType, VideoRef


def test_book_for_seed_resident(data):
    book = build_legacy_book(data, "RES-001")

    assert book["title"] == "The Legacy of Eleanor Vance"
    assert book["resident"]["family_contact_name"] == "John Vance"
    assert [s["recording_id"] for s in book["stories"]] == ["VID-001"]
    assert book["messages"] == []
    assert book["stories"][0]["transcription_status"] == "Complete"


def test_entries_are_oldest_first(store, clock, fixed_now):
    stamps = iter([fixed_now, fixed_now + timedelta(minutes=1), fixed_now + timedelta(minutes=2)])
    data = LegacyData(store, ids=IdFactory(clock=clock), now=lambda: next(stamps))
    for name in ("a.mp4", "b.mp4"):
        data.add_recording(
            RecordingDraft(
                resident_id="RES-002",
                recording_type=RecordingType.message,
                video_file=VideoRef(name=name),
            )
        )

    messages = build_legacy_book(data, "RES-002")["messages"]
    # The seed message is dated a day before the first clock reading.
    assert [m["video"] for m in messages] == ["message_to_grandkids.mp4", "a.mp4", "b.mp4"]


def test_unknown_resident_has_no_book(data):
    assert build_legacy_book(data, "RES-missing") is None
    assert export_json(data, "RES-missing") is None


def test_export_json_is_valid_json(data):
    parsed = json.loads(export_json(data, "RES-001"))
    assert parsed["stories"][0]["summary"].startswith("The resident expresses")


def test_export_pdf_bytes(data):
    pytest.importorskip("reportlab")
    pdf = export_pdf(data, "RES-001")
    assert pdf.startswith(b"%PDF")


def test_export_pdf_handles_markup_characters(data):
    pytest.importorskip("reportlab")
    data.add_recording(
        RecordingDraft(
            resident_id="STAFF-001",
            recording_type=RecordingType.life_story,
            associated_prompt="Fish & chips <or> pie?",
            video_file=VideoRef(name="x.mp4"),
            transcription_text="Line one\nLine <two> & more",
        )
    )
    assert export_pdf(data, "STAFF-001").startswith(b"%PDF")
