import pytest

from pipelines import assistant
from pipelines.assistant import (
    DEMO_PROMPT_IDEAS,
    draft_transcription,
    generate_prompt_question,
    summarize,
)
from pipelines.postprocess import AssistantError, clean_generated_text, first_line, require_text


# ---------------------------------------------------------------------------
# Output cleanup
# ---------------------------------------------------------------------------

def test_clean_strips_fences_label_and_quotes():
    raw = '```text\nQuestion: "What was your first car?"\n```'
    assert clean_generated_text(raw) == "What was your first car?"


def test_clean_keeps_words_that_only_start_like_labels():
    assert clean_generated_text("Answering the door was my job.") == "Answering the door was my job."


def test_clean_collapses_blank_lines():
    assert clean_generated_text("one\n\n\n\ntwo") == "one\n\ntwo"


def test_first_line_skips_blank_lines():
    assert first_line("\n\n  'Hello?'  \nSecond") == "Hello?"


def test_require_text_raises_on_empty():
    with pytest.raises(AssistantError):
        require_text('```\n""\n```', "question")


# ---------------------------------------------------------------------------
# Demo mode
# ---------------------------------------------------------------------------

def test_demo_prompt_ideas_cycle():
    assert generate_prompt_question(seed=0) == DEMO_PROMPT_IDEAS[0]
    assert generate_prompt_question(seed=len(DEMO_PROMPT_IDEAS) + 1) == DEMO_PROMPT_IDEAS[1]


def test_demo_transcription_mentions_name_and_prompt():
    text = draft_transcription("Eleanor Vance", "What was your proudest moment?")
    assert text.startswith('[Demo transcription] Eleanor Vance talks about "What was your proudest moment?".')


def test_demo_transcription_defaults():
    text = draft_transcription(None, None)
    assert "a resident" in text
    assert "a personal message" in text


def test_demo_summary_truncates_long_text():
    words = [f"w{i}" for i in range(40)]
    summary = summarize(" ".join(words))
    assert summary == "[Demo summary] " + " ".join(words[:25]) + "..."


def test_demo_summary_short_text_untouched():
    assert summarize("Short and sweet.") == "[Demo summary] Short and sweet."


def test_summarize_empty_text_raises():
    with pytest.raises(AssistantError):
        summarize("   ")


# ---------------------------------------------------------------------------
# Model mode (runner replaced)
# ---------------------------------------------------------------------------

def test_model_output_is_cleaned(monkeypatch):
    calls = []

    def fake_run(instruction, max_new_tokens):
        calls.append(max_new_tokens)
        return 'Question: "Where did you grow up?"\nCategory: Childhood'

    monkeypatch.setattr(assistant, "_run", fake_run)
    assert generate_prompt_question(demo_mode=False) == "Where did you grow up?"
    assert calls == [64]


def test_model_empty_output_raises(monkeypatch):
    monkeypatch.setattr(assistant, "_run", lambda instruction, max_new_tokens: "  ")
    with pytest.raises(AssistantError):
        draft_transcription("Arthur", "A message", demo_mode=False)


def test_model_summary_uses_text(monkeypatch):
    seen = {}

    def fake_run(instruction, max_new_tokens):
        seen["instruction"] = instruction
        return "Summary: A warm memory of summer."

    monkeypatch.setattr(assistant, "_run", fake_run)
    assert summarize("We went to the lake.", demo_mode=False) == "A warm memory of summer."
    assert "We went to the lake." in seen["instruction"]
