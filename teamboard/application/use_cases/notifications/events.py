"""Create notifications and keep live subscribers up to date."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from teamboard.config import get_settings
from teamboard.domain.entities import (
    Notification,
    NotificationRetentionPolicy,
    NotificationType,
)
from teamboard.domain.exceptions import StoreError
from teamboard.domain.mentions import resolve_fanout
from teamboard.infrastructure.notifications import notification_publisher
from teamboard.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def retention_policy() -> NotificationRetentionPolicy:
    """Build the retention policy from the application settings."""

    settings = get_settings()
    return NotificationRetentionPolicy(
        threshold=settings.notification_cleanup_threshold,
        keep=settings.notification_max_keep,
    )


def publish_current_snapshot(session: Session, recipient_id: str) -> None:
    """Send the recipient's newest entries to its live subscribers, if any."""

    feed = notification_publisher.feed
    if not feed.has_subscribers(recipient_id):
        return
    snapshot = NotificationRepository(session).list_for_recipient(
        recipient_id, limit=feed.snapshot_limit(recipient_id)
    )
    notification_publisher.publish(recipient_id, snapshot)


def append_notification(
    session: Session,
    recipient_id: str | None,
    *,
    type: NotificationType,
    title: str,
    link: str = "",
    policy: NotificationRetentionPolicy | None = None,
) -> Notification | None:
    """Append an unread entry to ``recipient_id``'s log and prune it.

    Blank recipients are ignored. A failed append raises
    :class:`~teamboard.domain.exceptions.StoreError`. Once the entry is stored,
    a failed prune or push is only logged: the next append prunes again and
    the next subscription starts from the store.
    """

    recipient = (recipient_id or "").strip()
    if not recipient:
        return None

    repository = NotificationRepository(session)
    saved = repository.append(recipient, type=type, title=title, link=link)
    try:
        repository.cleanup(recipient, policy or retention_policy())
    except StoreError:
        logger.warning("Pruning notifications of %s deferred", recipient, exc_info=True)
    try:
        publish_current_snapshot(session, recipient)
    except Exception:
        session.rollback()
        logger.warning("Could not push notifications of %s", recipient, exc_info=True)
    return saved


def notify_members(
    session: Session,
    recipient_ids: Iterable[str | None],
    *,
    type: NotificationType,
    title: str,
    link: str = "",
) -> set[str]:
    """Notify each recipient once, best effort.

    A failure for one recipient is logged and does not stop the others.
    Returns the recipients that were notified.
    """

    recipients = sorted({(rid or "").strip() for rid in recipient_ids} - {""})
    delivered: set[str] = set()
    for recipient in recipients:
        try:
            append_notification(session, recipient, type=type, title=title, link=link)
        except Exception:
            session.rollback()
            logger.warning(
                "Failed to create %s notification for %s",
                NotificationType(type).value,
                recipient,
                exc_info=True,
            )
            continue
        delivered.add(recipient)
    return delivered


def fan_out_mentions(
    session: Session,
    *,
    content: str,
    author_id: str | None,
    title: str,
    link: str,
) -> set[str]:
    """Notify every member mentioned in ``content`` except its author."""

    recipients = resolve_fanout(content, author_id)
    if not recipients:
        return set()
    delivered = notify_members(
        session, recipients, type=NotificationType.MENTION, title=title, link=link
    )
    logger.debug("Mention fan-out to %s of %s recipients", len(delivered), len(recipients))
    return delivered


__all__ = [
    "append_notification",
    "fan_out_mentions",
    "notify_members",
    "publish_current_snapshot",
    "retention_policy",
]
