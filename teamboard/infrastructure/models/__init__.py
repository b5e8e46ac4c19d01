"""ORM models used by the application infrastructure."""

from .member import MemberModel
from .note import NoteModel, TaskCommentModel
from .notification import NotificationModel

__all__ = [
    "MemberModel",
    "NoteModel",
    "TaskCommentModel",
    "NotificationModel",
]
