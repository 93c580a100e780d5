from __future__ import annotations

from pydantic import BaseModel


class ActivityItem(BaseModel):
    id: str
    command: str
    field: str
    field_label: str
    value: str
    channel: str
    timestamp: str
