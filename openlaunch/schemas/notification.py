from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class NotificationOut(BaseModel):
    notification_id: str
    type: str
    title: str
    body: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    is_read: bool
    created_at: datetime


class UnreadCountOut(BaseModel):
    unread: int


class MarkReadResponse(BaseModel):
    ok: bool
    updated: int
