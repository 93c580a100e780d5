from __future__ import annotations

import os

from services.api.app.llm.base import CommandExtractor
from services.api.app.llm.rule_based import RuleBasedCommandExtractor


def get_command_extractor() -> CommandExtractor:
    """Select the command extractor from FORMVOICE_LLM_PROVIDER.

    `rules` (default) runs the rule-based interpreter in-process: no API key, no network
    round trip per utterance, and the same transcript always yields the same update.
    `openai` sends each command to the function-calling model and needs OPENAI_API_KEY;
    its answers are checked against the same field dictionary but are not reproducible.
    """

    provider = os.getenv("FORMVOICE_LLM_PROVIDER", "rules").strip().lower()

    if provider == "rules":
        return RuleBasedCommandExtractor()

    if provider == "openai":
        from services.api.app.llm.openai_extractor import (
            OpenAICommandExtractor,
            default_openai_model,
        )

        api_key = os.getenv("OPENAI_API_KEY", "").strip()
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required when FORMVOICE_LLM_PROVIDER=openai")

        return OpenAICommandExtractor(api_key=api_key, model=default_openai_model())

    raise ValueError(f"Unknown FORMVOICE_LLM_PROVIDER={provider!r}. Expected rules or openai.")
