"""Read-side operations on a member's notification log."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from teamboard.domain.entities import Notification
from teamboard.infrastructure.notifications import (
    DEFAULT_SUBSCRIPTION_LIMIT,
    Listener,
    Subscription,
    notification_feed,
)
from teamboard.infrastructure.repositories import NotificationRepository

from .events import publish_current_snapshot


def list_notifications(
    session: Session, recipient_id: str, *, limit: int = DEFAULT_SUBSCRIPTION_LIMIT
) -> Sequence[Notification]:
    """Newest-first entries of ``recipient_id``'s log."""

    return NotificationRepository(session).list_for_recipient(recipient_id, limit=limit)


def count_unread(session: Session, recipient_id: str) -> int:
    return NotificationRepository(session).count_unread(recipient_id)


def mark_read(session: Session, recipient_id: str, notification_ids: Iterable[int]) -> int:
    """Mark entries read; nothing is written when they are already read."""

    changed = NotificationRepository(session).mark_read(recipient_id, notification_ids)
    if changed:
        publish_current_snapshot(session, recipient_id)
    return changed


def mark_all_read(session: Session, recipient_id: str) -> int:
    changed = NotificationRepository(session).mark_all_read(recipient_id)
    if changed:
        publish_current_snapshot(session, recipient_id)
    return changed


def delete_all_notifications(session: Session, recipient_id: str) -> int:
    """Clear the whole log, e.g. on a member's first login."""

    removed = NotificationRepository(session).delete_all(recipient_id)
    if removed:
        publish_current_snapshot(session, recipient_id)
    return removed


def subscribe_to_notifications(
    session: Session,
    recipient_id: str | None,
    *,
    listener: Listener | None = None,
    limit: int = DEFAULT_SUBSCRIPTION_LIMIT,
) -> Subscription:
    """Open a live, newest-first view of ``recipient_id``'s log.

    The subscription starts with the current entries. Call
    :meth:`Subscription.unsubscribe` on teardown.
    """

    recipient = (recipient_id or "").strip()
    if not recipient:
        return notification_feed.subscribe(None, limit=limit)
    initial = NotificationRepository(session).list_for_recipient(recipient, limit=limit)
    return notification_feed.subscribe(
        recipient, listener=listener, limit=limit, initial=initial
    )


__all__ = [
    "count_unread",
    "delete_all_notifications",
    "list_notifications",
    "mark_all_read",
    "mark_read",
    "subscribe_to_notifications",
]
