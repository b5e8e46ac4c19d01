"""Realtime notification helpers for the infrastructure layer."""

from .feed import (
    DEFAULT_SUBSCRIPTION_LIMIT,
    Listener,
    NotificationFeed,
    Subscription,
    notification_feed,
)
from .publisher import (
    NotificationPublisher,
    notification_publisher,
    serialize_notification,
)

__all__ = [
    "DEFAULT_SUBSCRIPTION_LIMIT",
    "Listener",
    "NotificationFeed",
    "Subscription",
    "notification_feed",
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
