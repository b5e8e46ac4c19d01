"""Repository implementations for infrastructure layer."""

from .member_repository import MemberRepository
from .note_repository import NoteRepository
from .notification_repository import NotificationRepository
from .task_comment_repository import TaskCommentRepository

__all__ = [
    "MemberRepository",
    "NoteRepository",
    "NotificationRepository",
    "TaskCommentRepository",
]
