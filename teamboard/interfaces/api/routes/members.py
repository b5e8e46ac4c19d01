"""Member directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from teamboard.application.use_cases.members import (
    MEMBER_NOT_FOUND,
    get_member as get_member_uc,
    list_members as list_members_uc,
    mentionable_members as mentionable_members_uc,
    register_member as register_member_uc,
)
from teamboard.domain.entities import Member
from teamboard.infrastructure.database import get_db
from teamboard.interfaces.api.schemas import MemberRead, MemberRegister

router = APIRouter(prefix="/members", tags=["members"])


def _to_read_model(member: Member) -> MemberRead:
    return MemberRead(id=member.id, display_name=member.display_name, email=member.email)


@router.get("/", response_model=list[MemberRead])
def list_members(db: Session = Depends(get_db)) -> list[MemberRead]:
    return [_to_read_model(member) for member in list_members_uc(db)]


@router.get("/mentionable", response_model=list[MemberRead])
def list_mentionable_members(
    query: str = Query(default="", max_length=120),
    limit: int | None = Query(default=None, ge=1, le=50),
    db: Session = Depends(get_db),
) -> list[MemberRead]:
    """Candidates for the ``@query`` currently being typed."""

    members = mentionable_members_uc(db, query, limit=limit)
    return [_to_read_model(member) for member in members]


@router.put("/", response_model=MemberRead)
def register_member(payload: MemberRegister, db: Session = Depends(get_db)) -> MemberRead:
    try:
        member = register_member_uc(
            db,
            member_id=payload.id,
            display_name=payload.display_name,
            email=payload.email,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(member)


@router.get("/{member_id}", response_model=MemberRead)
def read_member(member_id: str, db: Session = Depends(get_db)) -> MemberRead:
    """Profile target of a rendered mention."""

    try:
        member = get_member_uc(db, member_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=MEMBER_NOT_FOUND
        ) from exc
    return _to_read_model(member)
