"""Use case for creating notes."""

from sqlalchemy.orm import Session

from teamboard.application.use_cases.notifications import fan_out_mentions
from teamboard.domain.entities import Member, Note
from teamboard.infrastructure.repositories import NoteRepository

from .validators import normalize_content


def note_link(note_id: int | None) -> str:
    return f"/notes?open={note_id}"


def create_note(session: Session, *, content: str, author: Member) -> Note:
    """Save a new note and notify the members it mentions."""

    note = Note(
        id=None,
        content=normalize_content(content),
        author_id=author.id,
        author_name=author.display_name,
    )
    saved = NoteRepository(session).create(note)
    fan_out_mentions(
        session,
        content=saved.content,
        author_id=author.id,
        title=f"{author.display_name} mentioned you in a note",
        link=note_link(saved.id),
    )
    return saved
