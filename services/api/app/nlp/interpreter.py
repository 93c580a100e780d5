"""Rule-based interpretation of form update commands.

Maps an utterance such as "change the deductible to $2,000" onto a
`CommandResultV1(field="deductible", value="2000")`. Matching is deliberately
lenient: a field is found by plain substring containment of any of its terms,
which tolerates transcription noise at the cost of occasional false positives on
short aliases.
"""

from __future__ import annotations

import re

import structlog

from packages.shared.schemas.command import CommandResultV1, FieldDefinitionV1
from services.api.app.log_config import quiet_unconfigured_logging
from services.api.app.nlp.fields import FieldDictionary, default_field_dictionary
from services.api.app.nlp.normalize import normalize_value

quiet_unconfigured_logging()
logger = structlog.get_logger(__name__)

PREPOSITIONS: tuple[str, ...] = ("to", "as", "with", "is", "for")

COMMAND_VERBS: tuple[str, ...] = (
    "update",
    "change",
    "set",
    "modify",
    "make",
    "put",
    "please",
    "can you",
)

# A comma followed by a word ends the value: "to 500, please". Digits after the
# comma keep it, as in "january 15, 2024".
_CLAUSE_BREAK = re.compile(r",\s+(?=\D)")
_TRAILING = re.compile(r"[\s.,]+$")


class CommandInterpreter:
    """Parses free text into a field/value update.

    Stateless apart from the read-only field dictionary, so one instance can be
    shared by any number of callers.
    """

    def __init__(self, fields: FieldDictionary | None = None) -> None:
        self._fields = fields if fields is not None else default_field_dictionary()

    @property
    def fields(self) -> FieldDictionary:
        return self._fields

    def interpret(self, command: str) -> CommandResultV1 | None:
        # Collapse runs of whitespace, newlines included.
        text = " ".join((command or "").lower().split())
        if not text:
            return None

        field = self.find_field(text)
        if field is None:
            logger.debug("command_no_field", command=text)
            return None

        raw_value = self.extract_value(text, field)
        if raw_value is None:
            logger.debug("command_no_value", command=text, field=field.id)
            return None

        value = normalize_value(field, raw_value)
        if not value:
            logger.debug("command_empty_value", command=text, field=field.id, raw=raw_value)
            return None

        return CommandResultV1(field=field.id, value=value)

    def find_field(self, text: str) -> FieldDefinitionV1 | None:
        """First field, in declaration order, with any term contained in `text`."""
        for field in self._fields:
            if any(term in text for term in field.terms()):
                return field
        return None

    def extract_value(self, text: str, field: FieldDefinitionV1) -> str | None:
        # Longest terms first so "phone number" wins over "phone".
        terms = sorted((t for t in field.terms() if t in text), key=len, reverse=True)

        for prep in PREPOSITIONS:
            for term in terms:
                m = re.search(rf"{re.escape(term)} {prep} (?P<value>.+)", text)
                if m:
                    candidate = _clip_clause(m.group("value"))
                    if candidate:
                        return candidate

        for term in terms:
            m = re.search(rf"{re.escape(term)} (?P<value>.+)", text)
            if not m:
                continue
            candidate = _clip_clause(m.group("value"))
            if not candidate or candidate in PREPOSITIONS:
                continue
            if not _starts_with_command_verb(candidate):
                return candidate

        if " to " in text:
            candidate = _clip_clause(text.split(" to ", 1)[1])
            if candidate:
                return candidate

        return None


def _clip_clause(value: str) -> str:
    """Cut `value` at the first clause boundary and drop trailing periods and commas."""
    value = _CLAUSE_BREAK.split(value, maxsplit=1)[0]
    return _TRAILING.sub("", value).strip()


def _starts_with_command_verb(value: str) -> bool:
    return any(value == verb or value.startswith(verb + " ") for verb in COMMAND_VERBS)
