from __future__ import annotations

from packages.shared.schemas.command import CommandResultV1
from services.api.app.nlp.fields import FieldDictionary
from services.api.app.nlp.interpreter import CommandInterpreter


class RuleBasedCommandExtractor:
    """Deterministic extractor backed by the rule-based interpreter.

    Default provider: no network access, identical input gives identical output.
    """

    def __init__(self, fields: FieldDictionary | None = None) -> None:
        self._interpreter = CommandInterpreter(fields)

    def extract(self, *, raw_command_text: str) -> CommandResultV1 | None:
        return self._interpreter.interpret(raw_command_text)
