from .member import MemberRead, MemberRegister
from .note import (
    ContentWrite,
    MentionSegmentRead,
    NoteRead,
    PinRequest,
    SegmentRead,
    TaskCommentRead,
    TextSegmentRead,
)
from .notification import (
    NotificationChangeResponse,
    NotificationCountResponse,
    NotificationMarkReadRequest,
    NotificationRead,
)

__all__ = [
    "ContentWrite",
    "MemberRead",
    "MemberRegister",
    "MentionSegmentRead",
    "NoteRead",
    "NotificationChangeResponse",
    "NotificationCountResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "PinRequest",
    "SegmentRead",
    "TaskCommentRead",
    "TextSegmentRead",
]
