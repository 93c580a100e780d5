from __future__ import annotations

from uuid import uuid4

import structlog
from fastapi import APIRouter, Depends, HTTPException
from packages.shared.schemas.command import CommandResultV1
from services.api.app.db.database import get_db
from services.api.app.db.models import ActivityEntry
from services.api.app.llm.base import CommandExtractor
from services.api.app.llm.factory import get_command_extractor
from services.api.app.models.command import CommandApplyResponse, CommandParseRequest
from services.api.app.nlp.fields import default_field_dictionary
from services.api.app.services.form_store import store
from sqlalchemy.orm import Session

logger = structlog.get_logger(__name__)

router = APIRouter()

NOT_UNDERSTOOD_MESSAGE = "Sorry, I couldn't understand that command. Please try again."

_FIELDS = default_field_dictionary()


def _extractor() -> CommandExtractor:
    try:
        return get_command_extractor()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.post("/v1/command/parse", response_model=CommandResultV1 | None)
def parse_command(payload: CommandParseRequest) -> CommandResultV1 | None:
    return _extractor().extract(raw_command_text=payload.raw_command_text)


@router.post("/v1/command", response_model=CommandApplyResponse)
def submit_command(
    payload: CommandParseRequest, db: Session = Depends(get_db)
) -> CommandApplyResponse:
    result = _extractor().extract(raw_command_text=payload.raw_command_text)

    if result is None:
        logger.info("command_not_understood", channel=payload.channel)
        return CommandApplyResponse(
            recognized=False,
            message=NOT_UNDERSTOOD_MESSAGE,
            form_data=store.get(),
        )

    try:
        form_data = store.update({result.field: result.value})
    except ValueError as e:
        # The extractor named a field the form does not have.
        raise HTTPException(status_code=400, detail=str(e)) from e

    db.add(
        ActivityEntry(
            id=uuid4().hex,
            channel=payload.channel,
            command_text=payload.raw_command_text,
            field=result.field,
            value=result.value,
        )
    )
    db.commit()

    logger.info("command_applied", field=result.field, value=result.value, channel=payload.channel)

    return CommandApplyResponse(
        recognized=True,
        field=result.field,
        value=result.value,
        message=f"Updated {_FIELDS.display_name(result.field)} to {result.value}.",
        form_data=form_data,
    )
