from __future__ import annotations

from pydantic import BaseModel, Field

from services.api.app.models.form import FormData


class CommandParseRequest(BaseModel):
    channel: str = "API"
    raw_command_text: str = Field(..., min_length=1)


class CommandApplyResponse(BaseModel):
    recognized: bool
    field: str | None = None
    value: str | None = None
    message: str
    form_data: FormData
