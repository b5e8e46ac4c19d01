"""Helpers shared by the repositories."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import false
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from teamboard.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(session: Session, action: str) -> Iterator[None]:
    """Roll back and raise :class:`StoreError` when the DB layer fails."""

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("Store operation failed: %s", action, exc_info=True)
        raise StoreError(f"Could not {action}") from exc


def apply_single_pin(session: Session, model, target_id: int | None, *scope) -> None:
    """Pin ``target_id`` and unpin every other item matching ``scope``.

    A single UPDATE rewrites ``pinned`` on every row of the scope, so the
    write lock is held before the new state is decided and concurrent calls
    settle on exactly one pinned item. ``target_id=None`` unpins everything.
    Raises ``ValueError`` for an unknown target before any write.
    """

    with store_operation(session, f"update pinned {model.__tablename__}"):
        if target_id is not None:
            exists = (
                session.query(model.id)
                .filter(model.id == target_id, *scope)
                .one_or_none()
            )
            if exists is None:
                session.rollback()
                raise ValueError(f"{model.__tablename__} {target_id} not found")

        pinned = model.id == target_id if target_id is not None else false()
        session.query(model).filter(*scope).update(
            {model.pinned: pinned}, synchronize_session=False
        )
        session.commit()


__all__ = ["apply_single_pin", "store_operation"]
