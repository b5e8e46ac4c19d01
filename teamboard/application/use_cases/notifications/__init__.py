"""Public helpers for emitting and reading member notifications."""

from .events import (
    append_notification,
    fan_out_mentions,
    notify_members,
    publish_current_snapshot,
    retention_policy,
)
from .inbox import (
    count_unread,
    delete_all_notifications,
    list_notifications,
    mark_all_read,
    mark_read,
    subscribe_to_notifications,
)

__all__ = [
    "append_notification",
    "fan_out_mentions",
    "notify_members",
    "publish_current_snapshot",
    "retention_policy",
    "count_unread",
    "delete_all_notifications",
    "list_notifications",
    "mark_all_read",
    "mark_read",
    "subscribe_to_notifications",
]
