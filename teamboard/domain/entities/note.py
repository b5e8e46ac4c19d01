"""Domain entities for annotated items (notes and task comments)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Note:
    """Standalone note shown on the notes board.

    ``content`` is canonical text and may contain mention tokens. At most one
    note is pinned at a time.
    """

    id: int | None
    content: str
    author_id: str
    author_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pinned: bool = False


@dataclass
class TaskComment:
    """Comment attached to a task; pinning is scoped to its task."""

    id: int | None
    task_id: str
    content: str
    author_id: str
    author_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pinned: bool = False


__all__ = ["Note", "TaskComment"]
