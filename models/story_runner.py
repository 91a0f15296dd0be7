"""
models/story_runner.py

Loads and runs an instruction-tuned causal LM for the story assistant
(prompt ideas, draft transcriptions, summaries).

Model:
- LEGACY_ASSISTANT_MODEL picks the Hugging Face repo (default gemma-2-2b-it).
- Prompts go through the tokenizer's chat template.

Auth:
- If the repo is gated, you must be logged in OR provide a token via:
  HUGGINGFACE_HUB_TOKEN or HF_TOKEN
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import torch
from transformers import AutoModelForCausalLM, AutoTokenizer

logger = logging.getLogger(__name__)

MODEL_NAME = os.environ.get("LEGACY_ASSISTANT_MODEL", "google/gemma-2-2b-it")


def _get_hf_token_optional() -> Optional[str]:
    return os.environ.get("HUGGINGFACE_HUB_TOKEN") or os.environ.get("HF_TOKEN")


class StoryRunner:
    """Wraps a chat-template causal LM for short text generation."""

    def __init__(self, model_name: str = MODEL_NAME) -> None:
        self.model_name = model_name
        self.device: str = "cuda" if torch.cuda.is_available() else "cpu"
        logger.info("StoryRunner: using device=%s", self.device)

        token = _get_hf_token_optional()

        logger.info("Loading tokenizer for %s ...", model_name)
        self.tokenizer = AutoTokenizer.from_pretrained(model_name, token=token)

        if self.device == "cuda":
            logger.info("Loading model for %s (fp16, device_map=auto) ...", model_name)
            self.model = AutoModelForCausalLM.from_pretrained(
                model_name,
                token=token,
                torch_dtype=torch.float16,
                device_map="auto",
            )
        else:
            logger.info("Loading model for %s (cpu fp32) ...", model_name)
            self.model = AutoModelForCausalLM.from_pretrained(
                model_name,
                token=token,
                torch_dtype=torch.float32,
            ).to("cpu")

        self.model.eval()
        logger.info("StoryRunner: model loaded successfully.")

    def _get_model_device(self) -> torch.device:
        dev = getattr(self.model, "device", None)
        if isinstance(dev, torch.device):
            return dev
        if isinstance(dev, str):
            return torch.device(dev)
        return next(self.model.parameters()).device

    def generate(self, instruction: str, max_new_tokens: int = 256) -> str:
        """Run one user turn through the chat template and return the reply text."""
        messages = [{"role": "user", "content": instruction}]
        input_ids = self.tokenizer.apply_chat_template(
            messages,
            add_generation_prompt=True,
            return_tensors="pt",
        ).to(self._get_model_device())

        with torch.no_grad():
            output_ids = self.model.generate(
                input_ids,
                max_new_tokens=max_new_tokens,
                do_sample=True,
                temperature=0.8,
                top_p=0.95,
            )

        input_len = int(input_ids.shape[-1])
        return self.tokenizer.decode(output_ids[0][input_len:], skip_special_tokens=True).strip()


# ---------------------------------------------------------------------------
# Module-level singleton (lazy-loaded by the app layer)
# ---------------------------------------------------------------------------
_runner: Optional[StoryRunner] = None


def get_runner() -> StoryRunner:
    global _runner
    if _runner is None:
        _runner = StoryRunner()
    return _runner
