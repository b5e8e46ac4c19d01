"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from teamboard.domain.entities import NotificationType


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[int] = Field(..., min_length=1, description="Notification identifiers")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        return list(dict.fromkeys(self.ids))


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    recipient_id: str
    type: NotificationType
    title: str
    link: str = ""
    created_at: datetime
    read: bool = False


class NotificationCountResponse(BaseModel):
    unread: int


class NotificationChangeResponse(BaseModel):
    """How many entries an inbox operation changed."""

    changed: int


__all__ = [
    "NotificationChangeResponse",
    "NotificationCountResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
]
