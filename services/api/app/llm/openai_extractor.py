from __future__ import annotations

import json
import os
import urllib.error
import urllib.request

import structlog

from packages.shared.schemas.command import CommandResultV1
from services.api.app.nlp.fields import FieldDictionary, default_field_dictionary

logger = structlog.get_logger(__name__)

_TOOL_NAME = "extractFormField"


class OpenAICommandExtractor:
    """Command extraction via OpenAI function calling.

    The model is forced to call a single tool whose arguments are `{field, value}`.
    Any failure collapses to None, the same "not understood" outcome as the rule-based path.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        fields: FieldDictionary | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._fields = fields if fields is not None else default_field_dictionary()

    def extract(self, *, raw_command_text: str) -> CommandResultV1 | None:
        if not (raw_command_text or "").strip():
            return None

        try:
            message = _openai_chat_tool_call(
                api_key=self._api_key,
                model=self._model,
                system_prompt=_system_prompt(self._fields),
                user_text=raw_command_text,
                tool=_tool_schema(self._fields),
            )
            result = _result_from_message(message)
        except Exception as e:
            # Fail closed: an unreachable or confused model means "not understood".
            logger.warning("openai_extract_failed", error=str(e))
            return None

        if result is None:
            return None

        if result.field not in self._fields:
            logger.warning("openai_unknown_field", field=result.field)
            return None

        return result


def _result_from_message(message: dict) -> CommandResultV1 | None:
    for call in message.get("tool_calls") or []:
        fn = call.get("function") or {}
        if call.get("type") == "function" and fn.get("name") == _TOOL_NAME:
            args = json.loads(fn.get("arguments") or "{}")
            return CommandResultV1.model_validate(args)
    return None


def _openai_chat_tool_call(
    *,
    api_key: str,
    model: str,
    system_prompt: str,
    user_text: str,
    tool: dict,
) -> dict:
    url = "https://api.openai.com/v1/chat/completions"

    body = {
        "model": model,
        "temperature": 0,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_text},
        ],
        "tools": [tool],
        "tool_choice": {"type": "function", "function": {"name": _TOOL_NAME}},
    }

    req = urllib.request.Request(url, method="POST")
    req.add_header("Authorization", f"Bearer {api_key}")
    req.add_header("Content-Type", "application/json")

    try:
        with urllib.request.urlopen(req, data=json.dumps(body).encode("utf-8"), timeout=45) as resp:
            payload = json.loads(resp.read().decode("utf-8"))
    except urllib.error.HTTPError as e:
        raw = e.read().decode("utf-8", errors="replace")
        raise RuntimeError(f"OpenAI HTTP {e.code}: {raw}") from e

    try:
        return payload["choices"][0]["message"]
    except Exception as e:
        raise RuntimeError(f"Unexpected OpenAI response shape: {payload!r}") from e


def _tool_schema(fields: FieldDictionary) -> dict:
    return {
        "type": "function",
        "function": {
            "name": _TOOL_NAME,
            "description": "Extract the field and value from a command",
            "parameters": {
                "type": "object",
                "properties": {
                    "field": {
                        "type": "string",
                        "enum": fields.ids(),
                        "description": "The field to update",
                    },
                    "value": {
                        "type": "string",
                        "description": "The value to set for the field",
                    },
                },
                "required": ["field", "value"],
            },
        },
    }


def _system_prompt(fields: FieldDictionary) -> str:
    select_rules = "\n".join(
        f"For {f.id}, normalize to: {', '.join(f.options)}." for f in fields if f.options
    )
    return f"""You extract intent from user commands for an insurance form.

The form has the following fields: {", ".join(fields.ids())}.

Examples:
- "Change the deductible to $2,000" -> {{"field": "deductible", "value": "2000"}}
- "Update my email to name@example.com" -> {{"field": "email", "value": "name@example.com"}}
- "Set the coverage amount to $200,000" -> {{"field": "coverageAmount", "value": "200000"}}
- "Change the policy type to Home Insurance" -> {{"field": "policyType", "value": "home"}}

Rules:
- Remove currency symbols and thousands separators from monetary values.
- Format dates as YYYY-MM-DD.
- Format 10-digit phone numbers as (XXX) XXX-XXXX.
{select_rules}
"""


def default_openai_model() -> str:
    return os.getenv("FORMVOICE_LLM_MODEL", "gpt-4o-mini")
