"""Live notification subscriptions grouped by recipient."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import DefaultDict, Set

from teamboard.domain.entities import Notification

logger = logging.getLogger(__name__)

DEFAULT_SUBSCRIPTION_LIMIT = 50

Listener = Callable[[list[Notification]], Awaitable[None]]


@dataclass(eq=False)
class Subscription:
    """Newest-first view of one recipient's log, kept current by the feed.

    ``latest`` always holds the last delivered snapshot. When ``listener`` is
    set it is awaited with every new snapshot.
    """

    recipient_id: str
    limit: int = DEFAULT_SUBSCRIPTION_LIMIT
    listener: Listener | None = None
    latest: list[Notification] = field(default_factory=list)
    active: bool = True
    _feed: "NotificationFeed | None" = field(default=None, repr=False)

    async def push(self, notifications: Sequence[Notification]) -> None:
        if not self.active:
            return
        self.latest = list(notifications[: self.limit])
        if self.listener is not None:
            await self.listener(list(self.latest))

    def unsubscribe(self) -> None:
        """Stop receiving updates. Safe to call more than once."""

        feed, self._feed = self._feed, None
        self.active = False
        if feed is not None:
            feed.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *_exc_info) -> None:
        self.unsubscribe()


class NotificationFeed:
    """Registry of active subscriptions keyed by recipient id."""

    def __init__(self) -> None:
        self._subscriptions: DefaultDict[str, Set[Subscription]] = defaultdict(set)

    def subscribe(
        self,
        recipient_id: str | None,
        *,
        listener: Listener | None = None,
        limit: int = DEFAULT_SUBSCRIPTION_LIMIT,
        initial: Sequence[Notification] = (),
    ) -> Subscription:
        """Register interest in ``recipient_id``'s log.

        A blank recipient gets an inert subscription with an empty ``latest``.
        """

        recipient = (recipient_id or "").strip()
        if not recipient:
            return Subscription(recipient_id="", limit=limit, active=False)

        subscription = Subscription(
            recipient_id=recipient,
            limit=limit,
            listener=listener,
            latest=list(initial[:limit]),
            _feed=self,
        )
        self._subscriptions[recipient].add(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Drop ``subscription``; forget the recipient once nobody listens."""

        subscription.active = False
        subscriptions = self._subscriptions.get(subscription.recipient_id)
        if subscriptions is None:
            return
        subscriptions.discard(subscription)
        if not subscriptions:
            self._subscriptions.pop(subscription.recipient_id, None)

    def has_subscribers(self, recipient_id: str) -> bool:
        return bool(self._subscriptions.get(recipient_id))

    def snapshot_limit(self, recipient_id: str) -> int:
        """Largest ``limit`` among the recipient's subscriptions (0 if none)."""

        return max(
            (subscription.limit for subscription in self._subscriptions.get(recipient_id, ())),
            default=0,
        )

    def recipients(self) -> list[str]:
        return list(self._subscriptions)

    async def deliver(self, recipient_id: str, notifications: Sequence[Notification]) -> None:
        """Push a fresh snapshot to every subscription of ``recipient_id``.

        A subscription whose listener fails is dropped.
        """

        for subscription in list(self._subscriptions.get(recipient_id, set())):
            try:
                await subscription.push(notifications)
            except Exception:
                logger.warning(
                    "Dropping notification subscriber of %s after listener failure",
                    recipient_id,
                    exc_info=True,
                )
                subscription.unsubscribe()


notification_feed = NotificationFeed()


__all__ = [
    "DEFAULT_SUBSCRIPTION_LIMIT",
    "Listener",
    "NotificationFeed",
    "Subscription",
    "notification_feed",
]
