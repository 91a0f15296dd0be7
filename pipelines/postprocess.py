"""
pipelines/postprocess.py

Cleans free-text model output before it is shown to residents or saved on a
recording. Chat models like to wrap answers in markdown fences, quotes or a
"Question:" label; none of that belongs in a prompt or a transcript.
"""

import re

_FENCE = re.compile(r"```[a-zA-Z]*")
_LEAD_LABEL = re.compile(
    r"^\s*(?:\*\*)?(?:question|summary|transcription|transcript|answer)\s*(?:\*\*)?\s*:\s*(?:\*\*)?\s*",
    flags=re.IGNORECASE,
)
_QUOTE_PAIRS = (('"', '"'), ("'", "'"), ("“", "”"), ("‘", "’"))


class AssistantError(RuntimeError):
    """The story assistant could not produce usable text."""


def _strip_wrapping_quotes(text: str) -> str:
    changed = True
    while changed and len(text) >= 2:
        changed = False
        for open_q, close_q in _QUOTE_PAIRS:
            if text.startswith(open_q) and text.endswith(close_q):
                text = text[1:-1].strip()
                changed = True
    return text


def clean_generated_text(raw_output: str) -> str:
    """
    Remove fences, a leading label and wrapping quotes; collapse blank lines.
    Returns "" when nothing usable is left.
    """
    text = _FENCE.sub("", raw_output or "").strip()
    text = _LEAD_LABEL.sub("", text, count=1)
    text = _strip_wrapping_quotes(text.strip())
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def first_line(text: str) -> str:
    """The first non-empty line, for answers that must be a single question."""
    for line in (text or "").splitlines():
        if line.strip():
            return _strip_wrapping_quotes(line.strip())
    return ""


def require_text(raw_output: str, what: str, single_line: bool = False) -> str:
    """
    Clean *raw_output*; raise :class:`AssistantError` if nothing is left.
    """
    text = clean_generated_text(raw_output)
    if single_line:
        text = first_line(text)
    if not text:
        raise AssistantError(f"The assistant returned an empty {what}.")
    return text
