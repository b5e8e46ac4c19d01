"""Aggregate application use cases."""

from .notes import create_note, set_pinned_note, update_note
from .notifications import append_notification, fan_out_mentions, notify_members

__all__ = [
    "append_notification",
    "create_note",
    "fan_out_mentions",
    "notify_members",
    "set_pinned_note",
    "update_note",
]
