"""FastAPI dependency utilities."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from teamboard.domain.entities import Member
from teamboard.infrastructure.database import get_db
from teamboard.infrastructure.repositories import MemberRepository

MEMBER_HEADER = "X-Member-Id"


def resolve_member(member_id: str | None, db: Session) -> Member:
    """Return the active member identified by ``member_id``."""

    member_id = (member_id or "").strip()
    if not member_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Member identification required",
        )

    member = MemberRepository(db).get(member_id)
    if member is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Member not found",
        )
    if not member.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive member",
        )
    return member


def get_current_member(
    x_member_id: str | None = Header(default=None, alias=MEMBER_HEADER),
    db: Session = Depends(get_db),
) -> Member:
    """Return the member acting on the request."""

    return resolve_member(x_member_id, db)
