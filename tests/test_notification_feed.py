"""Tests for live notification subscriptions."""

import asyncio

import pytest

from teamboard.application.use_cases.notifications import (
    append_notification,
    mark_all_read,
    subscribe_to_notifications,
)
from teamboard.domain.entities import Notification, NotificationType
from teamboard.infrastructure.notifications import (
    NotificationFeed,
    NotificationPublisher,
    notification_feed,
    serialize_notification,
)


def _entry(identifier, recipient="B1", title="hello"):
    return Notification(
        id=identifier,
        recipient_id=recipient,
        type=NotificationType.MENTION,
        title=title,
        link="/notes",
    )


@pytest.fixture(autouse=True)
def clean_shared_feed():
    yield
    for recipient in notification_feed.recipients():
        for subscription in list(notification_feed._subscriptions.get(recipient, ())):
            subscription.unsubscribe()


def test_blank_recipient_gets_inert_subscription():
    feed = NotificationFeed()

    subscription = feed.subscribe("  ")

    assert subscription.active is False
    assert subscription.latest == []
    assert feed.recipients() == []
    subscription.unsubscribe()


@pytest.mark.anyio
async def test_deliver_updates_latest_and_calls_listener():
    feed = NotificationFeed()
    received = []

    async def listener(snapshot):
        received.append([n.id for n in snapshot])

    subscription = feed.subscribe("B1", listener=listener, limit=2)
    await feed.deliver("B1", [_entry(3), _entry(2), _entry(1)])

    assert [n.id for n in subscription.latest] == [3, 2]
    assert received == [[3, 2]]
    assert feed.snapshot_limit("B1") == 2


@pytest.mark.anyio
async def test_unsubscribe_stops_delivery_and_forgets_recipient():
    feed = NotificationFeed()
    received = []

    async def listener(snapshot):
        received.append(snapshot)

    with feed.subscribe("B1", listener=listener) as subscription:
        assert feed.has_subscribers("B1")
    subscription.unsubscribe()
    await feed.deliver("B1", [_entry(1)])

    assert received == []
    assert feed.has_subscribers("B1") is False
    assert feed.recipients() == []


@pytest.mark.anyio
async def test_failing_listener_is_dropped():
    feed = NotificationFeed()
    healthy = []

    async def broken(_snapshot):
        raise RuntimeError("socket closed")

    async def listener(snapshot):
        healthy.append(snapshot)

    failing = feed.subscribe("B1", listener=broken)
    feed.subscribe("B1", listener=listener)

    await feed.deliver("B1", [_entry(1)])

    assert failing.active is False
    assert len(healthy) == 1
    assert feed.has_subscribers("B1")


@pytest.mark.anyio
async def test_publisher_schedules_delivery_on_running_loop():
    feed = NotificationFeed()
    publisher = NotificationPublisher(feed)
    subscription = feed.subscribe("B1")

    publisher.publish("B1", [_entry(7)])
    publisher.publish("J1", [_entry(8, recipient="J1")])
    await asyncio.sleep(0)
    await asyncio.sleep(0)

    assert [n.id for n in subscription.latest] == [7]


def test_publisher_without_loop_does_not_raise():
    feed = NotificationFeed()
    publisher = NotificationPublisher(feed)
    feed.subscribe("B1")

    publisher.publish("B1", [_entry(1)])


@pytest.mark.anyio
async def test_subscription_follows_appends(session, members):
    append_notification(session, "B1", type=NotificationType.MENTION, title="before")
    received = []

    async def listener(snapshot):
        received.append([(n.title, n.read) for n in snapshot])

    subscription = subscribe_to_notifications(session, "B1", listener=listener, limit=10)
    assert [n.title for n in subscription.latest] == ["before"]

    append_notification(session, "B1", type=NotificationType.MENTION, title="after")
    await asyncio.sleep(0.01)
    mark_all_read(session, "B1")
    await asyncio.sleep(0.01)

    assert received == [
        [("after", False), ("before", False)],
        [("after", True), ("before", True)],
    ]
    subscription.unsubscribe()
    assert notification_feed.has_subscribers("B1") is False


def test_subscribe_without_recipient_is_inert(session):
    subscription = subscribe_to_notifications(session, None)

    assert subscription.active is False
    assert subscription.latest == []


def test_serialize_notification():
    payload = serialize_notification(_entry(5))

    assert payload == {
        "id": 5,
        "recipient_id": "B1",
        "type": "mention",
        "title": "hello",
        "link": "/notes",
        "created_at": None,
        "read": False,
    }
