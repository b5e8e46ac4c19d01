"""Persistence helpers for the per-recipient notification log."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from teamboard.domain.entities import (
    Notification,
    NotificationRetentionPolicy,
    NotificationType,
)
from teamboard.infrastructure.models import NotificationModel
from teamboard.utils import from_storage, storage_now

from .common import store_operation

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 50


class NotificationRepository:
    """Append, read and prune the notifications of one recipient at a time.

    Every query is scoped to a ``recipient_id``; there is no global listing.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_recipient(
        self, recipient_id: str, *, limit: int | None = DEFAULT_LIST_LIMIT
    ) -> Sequence[Notification]:
        query = self._scoped(recipient_id).order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count(self, recipient_id: str) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.recipient_id == recipient_id)
            .scalar()
            or 0
        )

    def count_unread(self, recipient_id: str) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.recipient_id == recipient_id)
            .filter(NotificationModel.read.is_(False))
            .scalar()
            or 0
        )

    def append(
        self,
        recipient_id: str,
        *,
        type: NotificationType,
        title: str,
        link: str = "",
    ) -> Notification:
        """Insert an unread entry stamped with the server clock."""

        model = NotificationModel(
            recipient_id=recipient_id,
            type=NotificationType(type).value,
            title=title,
            link=link or "",
            created_at=storage_now(),
            read=False,
        )
        with store_operation(self.session, f"notify {recipient_id}"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def cleanup(self, recipient_id: str, policy: NotificationRetentionPolicy) -> int:
        """Prune the log back to ``policy.keep`` entries once over threshold.

        Returns the number of deleted entries.
        """

        with store_operation(self.session, f"prune notifications of {recipient_id}"):
            size = self.count(recipient_id)
            evict = policy.eviction_count(size)
            if evict <= 0:
                return 0

            oldest = (
                self.session.query(NotificationModel.id)
                .filter(NotificationModel.recipient_id == recipient_id)
                .order_by(NotificationModel.created_at.asc(), NotificationModel.id.asc())
                .limit(evict)
                .all()
            )
            ids = [row.id for row in oldest]
            self._scoped(recipient_id).filter(NotificationModel.id.in_(ids)).delete(
                synchronize_session=False
            )
            self.session.commit()
        logger.info(
            "Pruned %s notifications of %s (size %s, keep %s)",
            len(ids),
            recipient_id,
            size,
            policy.keep,
        )
        return len(ids)

    def mark_read(self, recipient_id: str, notification_ids: Iterable[int]) -> int:
        """Mark the given entries as read; returns how many changed."""

        ids = {notification_id for notification_id in notification_ids if notification_id is not None}
        if not ids:
            return 0
        with store_operation(self.session, f"read notifications of {recipient_id}"):
            unread = self._unread_ids(recipient_id, ids)
        return self._set_read(recipient_id, unread)

    def mark_all_read(self, recipient_id: str) -> int:
        with store_operation(self.session, f"read notifications of {recipient_id}"):
            unread = self._unread_ids(recipient_id)
        return self._set_read(recipient_id, unread)

    def delete_all(self, recipient_id: str) -> int:
        """Remove the whole log of ``recipient_id``; returns the count."""

        with store_operation(self.session, f"clear notifications of {recipient_id}"):
            size = self.count(recipient_id)
            if size == 0:
                return 0
            self._scoped(recipient_id).delete(synchronize_session=False)
            self.session.commit()
        return size

    def _scoped(self, recipient_id: str):
        return self.session.query(NotificationModel).filter(
            NotificationModel.recipient_id == recipient_id
        )

    def _unread_ids(self, recipient_id: str, among: set[int] | None = None) -> list[int]:
        query = self.session.query(NotificationModel.id).filter(
            NotificationModel.recipient_id == recipient_id,
            NotificationModel.read.is_(False),
        )
        if among is not None:
            query = query.filter(NotificationModel.id.in_(among))
        return [row.id for row in query.all()]

    def _set_read(self, recipient_id: str, ids: list[int]) -> int:
        if not ids:
            return 0
        with store_operation(self.session, f"mark notifications of {recipient_id} read"):
            self._scoped(recipient_id).filter(NotificationModel.id.in_(ids)).update(
                {NotificationModel.read: True}, synchronize_session=False
            )
            self.session.commit()
        return len(ids)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        try:
            notification_type = NotificationType(model.type)
        except ValueError:
            notification_type = NotificationType.MENTION
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            type=notification_type,
            title=model.title,
            link=model.link or "",
            created_at=from_storage(model.created_at),
            read=bool(model.read),
        )


__all__ = ["DEFAULT_LIST_LIMIT", "NotificationRepository"]
