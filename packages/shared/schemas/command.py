"""Shared command schema (v1).

Field definitions describe the form fields a spoken or typed command can target.
A command result is the `{field, value}` pair a recognized command resolves to.
These models are shared between the API and clients and should stay backwards compatible.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldTypeV1(str, Enum):
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    DATE = "date"
    CURRENCY = "currency"
    SELECT = "select"


class FieldDefinitionV1(BaseModel):
    """One updatable form field.

    `aliases` are lowercase phrases a user might say to refer to the field. For
    `select` fields, `synonyms` maps spoken phrases to one of `options`.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    display_name: str
    aliases: tuple[str, ...] = ()
    type: FieldTypeV1 = FieldTypeV1.TEXT
    options: tuple[str, ...] = ()
    synonyms: dict[str, str] = Field(default_factory=dict)

    def terms(self) -> tuple[str, ...]:
        """All phrases that can refer to this field, lowercased, first occurrence kept."""
        seen: dict[str, None] = {}
        for term in (self.id, self.display_name, *self.aliases):
            term = term.strip().lower()
            if term:
                seen.setdefault(term, None)
        return tuple(seen)


class CommandResultV1(BaseModel):
    field: str
    value: str
