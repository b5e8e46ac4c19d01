"""Endpoints for the notes board."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from teamboard.application.use_cases.notes import (
    NOTE_NOT_FOUND,
    NOTE_PINNED,
    create_note as create_note_uc,
    delete_note as delete_note_uc,
    get_note as get_note_uc,
    list_notes as list_notes_uc,
    set_pinned_note as set_pinned_note_uc,
    update_note as update_note_uc,
)
from teamboard.domain.entities import Member, Note
from teamboard.domain.mentions import MentionSegment, decode_content, has_mentions
from teamboard.infrastructure.database import get_db
from teamboard.interfaces.api.dependencies import get_current_member
from teamboard.interfaces.api.schemas import (
    ContentWrite,
    MentionSegmentRead,
    NoteRead,
    PinRequest,
    SegmentRead,
    TextSegmentRead,
)
from teamboard.utils import localize

router = APIRouter(prefix="/notes", tags=["notes"])


def member_profile_link(member_id: str) -> str:
    return f"/members/{member_id}"


def content_to_segments(content: str) -> list[SegmentRead]:
    """Renderable segments; mentions link to the member's profile."""

    segments: list[SegmentRead] = []
    for segment in decode_content(content):
        if isinstance(segment, MentionSegment):
            segments.append(
                MentionSegmentRead(
                    display_name=segment.display_name,
                    target_id=segment.target_id,
                    link=member_profile_link(segment.target_id),
                )
            )
        else:
            segments.append(TextSegmentRead(text=segment.text))
    return segments


def _to_read_model(note: Note) -> NoteRead:
    return NoteRead(
        id=note.id or 0,
        content=note.content,
        author_id=note.author_id,
        author_name=note.author_name,
        created_at=localize(note.created_at),
        updated_at=localize(note.updated_at),
        pinned=note.pinned,
        has_mentions=has_mentions(note.content),
    )


def _raise_for(exc: ValueError) -> None:
    detail = str(exc)
    status_code = status.HTTP_400_BAD_REQUEST
    if detail == NOTE_NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND
    elif detail == NOTE_PINNED:
        status_code = status.HTTP_409_CONFLICT
    raise HTTPException(status_code=status_code, detail=detail) from exc


@router.get("/", response_model=list[NoteRead])
def list_notes(db: Session = Depends(get_db)) -> list[NoteRead]:
    """Pinned note first, then newest first."""

    return [_to_read_model(note) for note in list_notes_uc(db)]


@router.post("/", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
def create_note(
    payload: ContentWrite,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> NoteRead:
    try:
        note = create_note_uc(db, content=payload.content, author=current_member)
    except ValueError as exc:
        _raise_for(exc)
    return _to_read_model(note)


@router.put("/pin", response_model=NoteRead | None)
def pin_note(
    payload: PinRequest,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> NoteRead | None:
    """Pin one note (unpinning any other); ``target_id: null`` unpins."""

    try:
        note = set_pinned_note_uc(db, payload.target_id)
    except ValueError as exc:
        _raise_for(exc)
    return _to_read_model(note) if note else None


@router.get("/{note_id}", response_model=NoteRead)
def read_note(note_id: int, db: Session = Depends(get_db)) -> NoteRead:
    try:
        note = get_note_uc(db, note_id)
    except ValueError as exc:
        _raise_for(exc)
    return _to_read_model(note)


@router.get("/{note_id}/segments", response_model=list[SegmentRead])
def read_note_segments(note_id: int, db: Session = Depends(get_db)) -> list[SegmentRead]:
    try:
        note = get_note_uc(db, note_id)
    except ValueError as exc:
        _raise_for(exc)
    return content_to_segments(note.content)


@router.put("/{note_id}", response_model=NoteRead)
def update_note(
    note_id: int,
    payload: ContentWrite,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> NoteRead:
    try:
        note = update_note_uc(db, note_id, content=payload.content, editor=current_member)
    except ValueError as exc:
        _raise_for(exc)
    return _to_read_model(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: int,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> Response:
    try:
        delete_note_uc(db, note_id)
    except ValueError as exc:
        _raise_for(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
