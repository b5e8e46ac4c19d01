"""Persistence helpers for the member directory."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamboard.domain.entities import Member
from teamboard.infrastructure.models import MemberModel

from .common import store_operation


class MemberRepository:
    """Read and maintain :class:`Member` directory entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_members(self, *, include_inactive: bool = False) -> Sequence[Member]:
        query = self.session.query(MemberModel)
        if not include_inactive:
            query = query.filter(MemberModel.is_active.is_(True))
        query = query.order_by(MemberModel.display_name.asc(), MemberModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, member_id: str) -> Member | None:
        model = self.session.get(MemberModel, member_id)
        return self._to_entity(model) if model else None

    def upsert(self, member: Member) -> Member:
        with store_operation(self.session, f"save member {member.id}"):
            model = self.session.get(MemberModel, member.id) or MemberModel(id=member.id)
            model.display_name = member.display_name
            model.email = member.email
            model.is_active = member.is_active
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: MemberModel) -> Member:
        return Member(
            id=model.id,
            display_name=model.display_name,
            email=model.email,
            is_active=bool(model.is_active),
        )


__all__ = ["MemberRepository"]
