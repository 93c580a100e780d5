from __future__ import annotations

import json

import pytest
import services.api.app.llm.openai_extractor as openai_extractor
from services.api.app.llm.openai_extractor import OpenAICommandExtractor


def _tool_message(arguments: dict) -> dict:
    return {
        "role": "assistant",
        "tool_calls": [
            {
                "id": "call_1",
                "type": "function",
                "function": {"name": "extractFormField", "arguments": json.dumps(arguments)},
            }
        ],
    }


@pytest.fixture()
def extractor() -> OpenAICommandExtractor:
    return OpenAICommandExtractor(api_key="sk-test", model="gpt-4o-mini")


def test_tool_call_arguments_become_result(
    extractor: OpenAICommandExtractor, monkeypatch: pytest.MonkeyPatch
) -> None:
    captured: dict = {}

    def fake_call(**kwargs) -> dict:
        captured.update(kwargs)
        return _tool_message({"field": "deductible", "value": "2000"})

    monkeypatch.setattr(openai_extractor, "_openai_chat_tool_call", fake_call)

    result = extractor.extract(raw_command_text="Change the deductible to $2,000")
    assert result is not None
    assert (result.field, result.value) == ("deductible", "2000")

    assert captured["user_text"] == "Change the deductible to $2,000"
    assert captured["tool"]["function"]["parameters"]["properties"]["field"]["enum"][0] == "firstName"
    assert "policyType, normalize to: home, auto, life, health" in captured["system_prompt"]


def test_unknown_field_is_not_understood(
    extractor: OpenAICommandExtractor, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(
        openai_extractor,
        "_openai_chat_tool_call",
        lambda **_: _tool_message({"field": "favoriteColor", "value": "blue"}),
    )
    assert extractor.extract(raw_command_text="my favorite color is blue") is None


def test_missing_tool_call_is_not_understood(
    extractor: OpenAICommandExtractor, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(
        openai_extractor,
        "_openai_chat_tool_call",
        lambda **_: {"role": "assistant", "content": "I am not sure."},
    )
    assert extractor.extract(raw_command_text="hmm") is None


def test_transport_failure_fails_closed(
    extractor: OpenAICommandExtractor, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom(**_) -> dict:
        raise RuntimeError("OpenAI HTTP 503: unavailable")

    monkeypatch.setattr(openai_extractor, "_openai_chat_tool_call", boom)
    assert extractor.extract(raw_command_text="set phone to 5551234567") is None


def test_blank_command_skips_the_network(
    extractor: OpenAICommandExtractor, monkeypatch: pytest.MonkeyPatch
) -> None:
    def unexpected(**_) -> dict:
        raise AssertionError("should not be called")

    monkeypatch.setattr(openai_extractor, "_openai_chat_tool_call", unexpected)
    assert extractor.extract(raw_command_text="   ") is None
