from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from services.api.app.db.database import get_db
from services.api.app.db.models import ActivityEntry
from services.api.app.models.activity import ActivityItem
from services.api.app.nlp.fields import default_field_dictionary
from sqlalchemy import select
from sqlalchemy.orm import Session

router = APIRouter()

_FIELDS = default_field_dictionary()


@router.get("/v1/activity", response_model=list[ActivityItem])
def list_activity(
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
) -> list[ActivityItem]:
    rows = db.scalars(
        select(ActivityEntry)
        .order_by(ActivityEntry.created_at.desc(), ActivityEntry.id.desc())
        .limit(limit)
    ).all()

    return [
        ActivityItem(
            id=row.id,
            command=row.command_text,
            field=row.field,
            field_label=_FIELDS.display_name(row.field),
            value=row.value,
            channel=row.channel,
            timestamp=row.created_at.isoformat(),
        )
        for row in rows
    ]
