"""Domain entities exposed by the application."""

from .member import Member
from .note import Note, TaskComment
from .notification import Notification, NotificationRetentionPolicy, NotificationType

__all__ = [
    "Member",
    "Note",
    "TaskComment",
    "Notification",
    "NotificationRetentionPolicy",
    "NotificationType",
]
