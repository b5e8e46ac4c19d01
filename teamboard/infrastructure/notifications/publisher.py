"""Utility helpers to push notification snapshots to live subscribers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from anyio import from_thread

from teamboard.domain.entities import Notification
from teamboard.utils import localize

from .feed import NotificationFeed, notification_feed

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Schedule snapshot delivery on the event loop serving subscribers."""

    def __init__(self, feed: NotificationFeed) -> None:
        self._feed = feed
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def feed(self) -> NotificationFeed:
        return self._feed

    def publish(self, recipient_id: str, snapshot: Sequence[Notification]) -> None:
        """Deliver ``snapshot`` to ``recipient_id``'s subscribers."""

        if not self._feed.has_subscribers(recipient_id):
            return

        notifications = list(snapshot)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(self._feed.deliver, recipient_id, notifications)
            except RuntimeError:
                logger.debug(
                    "No event loop reachable; snapshot for %s not pushed", recipient_id
                )
        else:
            task = loop.create_task(self._feed.deliver(recipient_id, notifications))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    created_at = localize(notification.created_at)
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "type": notification.type.value,
        "title": notification.title,
        "link": notification.link,
        "created_at": created_at.isoformat() if created_at else None,
        "read": notification.read,
    }


notification_publisher = NotificationPublisher(notification_feed)


__all__ = [
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
