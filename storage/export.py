"""
storage/export.py

Legacy book export - a resident's recorded stories and messages compiled into
a JSON string or PDF bytes that staff can hand to the family.

Dependencies
------------
- reportlab  (PDF generation)
- pipelines.legacy_data  (data access)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from io import BytesIO
from typing import Any
from xml.sax.saxutils import escape

from pipelines.legacy_data import LegacyData
from storage.models import RecordingType

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared data fetch
# ---------------------------------------------------------------------------


def build_legacy_book(data: LegacyData, resident_id: str) -> dict[str, Any] | None:
    """
    Assemble all exportable content for one resident.

    Returns ``None`` if the resident is unknown.
    """
    resident = data.get_resident_by_id(resident_id)
    if resident is None:
        return None

    recordings = sorted(data.recordings_for(resident_id), key=lambda r: r.timestamp)

    def _entry(rec) -> dict[str, Any]:
        return {
            "recording_id": rec.recording_id,
            "recorded_at": rec.timestamp.isoformat(),
            "prompt": rec.associated_prompt,
            "video": rec.video_file.name,
            "transcription_status": rec.transcription_status.value,
            "transcription": rec.transcription_text,
            "summary": rec.ai_summary,
        }

    return {
        "export_generated_at": datetime.now(tz=timezone.utc).isoformat(),
        "title": f"The Legacy of {resident.name}",
        "resident": {
            "resident_id": resident.resident_id,
            "name": resident.name,
            "family_contact_name": resident.family_contact_name,
        },
        "stories": [_entry(r) for r in recordings if r.recording_type == RecordingType.life_story],
        "messages": [_entry(r) for r in recordings if r.recording_type == RecordingType.message],
    }


# ---------------------------------------------------------------------------
# JSON export
# ---------------------------------------------------------------------------


def export_json(data: LegacyData, resident_id: str) -> str | None:
    """Pretty-printed JSON legacy book, or ``None`` for an unknown resident."""
    book = build_legacy_book(data, resident_id)
    if book is None:
        return None
    logger.info("Exported legacy book (json) for %s", resident_id)
    return json.dumps(book, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# PDF export
# ---------------------------------------------------------------------------


def export_pdf(data: LegacyData, resident_id: str) -> bytes | None:
    """
    Legacy book as PDF bytes, or ``None`` for an unknown resident.

    Raises:
        ImportError: reportlab is not installed.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import LETTER
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import inch
        from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer
    except ImportError as exc:
        logger.error("reportlab is not installed: %s", exc)
        raise ImportError(
            "PDF export requires reportlab. Install it with: pip install reportlab"
        ) from exc

    book = build_legacy_book(data, resident_id)
    if book is None:
        return None

    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=LETTER,
        leftMargin=inch,
        rightMargin=inch,
        topMargin=inch,
        bottomMargin=inch,
        title=book["title"],
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "BookTitle",
        parent=styles["Title"],
        fontSize=22,
        textColor=colors.HexColor("#3b2f5c"),
        spaceAfter=6,
    )
    heading_style = ParagraphStyle(
        "BookHeading",
        parent=styles["Heading2"],
        fontSize=13,
        textColor=colors.HexColor("#3b2f5c"),
        spaceBefore=14,
        spaceAfter=4,
    )
    normal = styles["Normal"]
    small = ParagraphStyle("Small", parent=normal, fontSize=8, textColor=colors.grey)
    italic = ParagraphStyle("Italic", parent=normal, fontName="Helvetica-Oblique")

    story = [
        Paragraph(escape(book["title"]), title_style),
        Paragraph(f"Compiled {book['export_generated_at'][:10]}", small),
        Spacer(1, 0.2 * inch),
    ]

    def _section(title: str, entries: list[dict[str, Any]]) -> None:
        if not entries:
            return
        story.append(Paragraph(title, heading_style))
        for e in entries:
            heading = e["prompt"] or "A personal message"
            story.append(Paragraph(f"<b>{escape(heading)}</b>", normal))
            story.append(Paragraph(f"Recorded {e['recorded_at'][:10]}", small))
            if e["summary"]:
                story.append(Paragraph(escape(e["summary"]), italic))
            body = e["transcription"] or "Transcription not yet available."
            story.append(Paragraph(escape(body).replace("\n", "<br/>"), normal))
            story.append(Spacer(1, 0.15 * inch))

    _section("Life Stories", book["stories"])
    _section("Messages", book["messages"])

    if not book["stories"] and not book["messages"]:
        story.append(Paragraph("No recordings yet.", normal))

    doc.build(story)
    logger.info("Exported legacy book (pdf) for %s", resident_id)
    return buf.getvalue()
