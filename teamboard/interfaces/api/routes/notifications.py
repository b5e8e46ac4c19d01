"""Endpoints and websocket handler for a member's notifications."""

from __future__ import annotations

import logging
from typing import Any

from anyio import to_thread
from fastapi import APIRouter, Depends, HTTPException, Query, WebSocket, WebSocketDisconnect
from sqlalchemy.orm import Session

from teamboard.application.use_cases.notifications import (
    count_unread,
    delete_all_notifications,
    list_notifications as list_notifications_uc,
    mark_all_read,
    mark_read,
    subscribe_to_notifications,
)
from teamboard.domain.entities import Member, Notification
from teamboard.infrastructure import database
from teamboard.infrastructure.database import get_db
from teamboard.infrastructure.notifications import (
    DEFAULT_SUBSCRIPTION_LIMIT,
    Listener,
    Subscription,
    serialize_notification,
)
from teamboard.interfaces.api.dependencies import get_current_member, resolve_member
from teamboard.interfaces.api.schemas import (
    NotificationChangeResponse,
    NotificationCountResponse,
    NotificationMarkReadRequest,
    NotificationRead,
)
from teamboard.utils import localize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        recipient_id=notification.recipient_id,
        type=notification.type,
        title=notification.title,
        link=notification.link,
        created_at=localize(notification.created_at),
        read=notification.read,
    )


def _snapshot_message(kind: str, notifications: list[Notification]) -> dict[str, Any]:
    return {"type": kind, "data": [serialize_notification(n) for n in notifications]}


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    limit: int = Query(default=DEFAULT_SUBSCRIPTION_LIMIT, ge=1, le=DEFAULT_SUBSCRIPTION_LIMIT),
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> list[NotificationRead]:
    """Return the most recent notifications of the acting member."""

    notifications = list_notifications_uc(db, current_member.id, limit=limit)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=NotificationCountResponse)
def read_unread_count(
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> NotificationCountResponse:
    return NotificationCountResponse(unread=count_unread(db, current_member.id))


@router.post("/read", response_model=NotificationChangeResponse)
def mark_notifications_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> NotificationChangeResponse:
    changed = mark_read(db, current_member.id, payload.unique_ids())
    return NotificationChangeResponse(changed=changed)


@router.post("/read-all", response_model=NotificationChangeResponse)
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> NotificationChangeResponse:
    return NotificationChangeResponse(changed=mark_all_read(db, current_member.id))


@router.delete("/", response_model=NotificationChangeResponse)
def delete_notifications(
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> NotificationChangeResponse:
    """Clear the acting member's log (used on first login)."""

    return NotificationChangeResponse(changed=delete_all_notifications(db, current_member.id))


def _authorize_socket(member_id: str | None) -> Member | None:
    session = database.SessionLocal()
    try:
        return resolve_member(member_id, session)
    except HTTPException:
        return None
    finally:
        session.close()


def _open_subscription(member_id: str, listener: Listener) -> Subscription:
    session = database.SessionLocal()
    try:
        return subscribe_to_notifications(session, member_id, listener=listener)
    finally:
        session.close()


def _acknowledge(member_id: str, ids: list[int]) -> None:
    session = database.SessionLocal()
    try:
        mark_read(session, member_id, ids)
    finally:
        session.close()


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream snapshots of the member's log while the socket is open.

    Store access runs in worker threads so the event loop keeps serving
    other sockets.
    """

    member = await to_thread.run_sync(
        _authorize_socket, websocket.query_params.get("member_id")
    )
    if member is None:
        await websocket.close(code=1008)
        return

    async def send_snapshot(notifications: list[Notification]) -> None:
        await websocket.send_json(_snapshot_message("snapshot", notifications))

    await websocket.accept()
    subscription = await to_thread.run_sync(_open_subscription, member.id, send_snapshot)

    try:
        await websocket.send_json(_snapshot_message("init", subscription.latest))
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    await to_thread.run_sync(
                        _acknowledge, member.id, [i for i in ids if isinstance(i, int)]
                    )
    except WebSocketDisconnect:
        logger.debug("Notification socket of %s closed", member.id)
    finally:
        subscription.unsubscribe()
