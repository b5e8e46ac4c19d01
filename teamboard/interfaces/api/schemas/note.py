"""Pydantic models for notes, task comments and rendered content."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Union

from pydantic import BaseModel, Field


class ContentWrite(BaseModel):
    """Canonical content of a note or comment, mention tokens included."""

    content: str = Field(..., min_length=1, max_length=1000)


class NoteRead(BaseModel):
    id: int
    content: str
    author_id: str
    author_name: str
    created_at: datetime
    updated_at: datetime | None = None
    pinned: bool = False
    has_mentions: bool = False


class TaskCommentRead(NoteRead):
    task_id: str


class PinRequest(BaseModel):
    """Item to pin; ``null`` unpins the current one."""

    target_id: int | None = None


class TextSegmentRead(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class MentionSegmentRead(BaseModel):
    kind: Literal["mention"] = "mention"
    display_name: str
    target_id: str
    link: str


SegmentRead = Union[TextSegmentRead, MentionSegmentRead]


__all__ = [
    "ContentWrite",
    "MentionSegmentRead",
    "NoteRead",
    "PinRequest",
    "SegmentRead",
    "TaskCommentRead",
    "TextSegmentRead",
]
