"""Member directory lookups used by the mention composer."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamboard.config import get_settings
from teamboard.domain.entities import Member
from teamboard.domain.mentions import filter_candidates
from teamboard.infrastructure.repositories import MemberRepository

MEMBER_NOT_FOUND = "Member not found"


def list_members(session: Session) -> Sequence[Member]:
    return MemberRepository(session).list_members()


def get_member(session: Session, member_id: str) -> Member:
    member = MemberRepository(session).get(member_id)
    if member is None:
        raise ValueError(MEMBER_NOT_FOUND)
    return member


def mentionable_members(
    session: Session, query: str = "", *, limit: int | None = None
) -> Sequence[Member]:
    """Candidates offered for ``@query``, filtered the same way as the composer."""

    return filter_candidates(
        list_members(session),
        query,
        limit=limit or get_settings().mention_candidate_limit,
    )


def register_member(
    session: Session, *, member_id: str, display_name: str, email: str | None = None
) -> Member:
    """Create or refresh a directory entry."""

    member_id = member_id.strip()
    display_name = display_name.strip()
    if not member_id or not display_name:
        raise ValueError("Member id and display name are required")
    return MemberRepository(session).upsert(
        Member(id=member_id, display_name=display_name, email=email)
    )
