from __future__ import annotations

from typing import Protocol

from packages.shared.schemas.command import CommandResultV1


class CommandExtractor(Protocol):
    def extract(self, *, raw_command_text: str) -> CommandResultV1 | None: ...
