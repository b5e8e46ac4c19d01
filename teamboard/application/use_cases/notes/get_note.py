"""Use cases for reading notes."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamboard.domain.entities import Note
from teamboard.infrastructure.repositories import NoteRepository

NOTE_NOT_FOUND = "Note not found"


def get_note(session: Session, note_id: int) -> Note:
    """Return the note identified by ``note_id`` or raise an error."""

    note = NoteRepository(session).get(note_id)
    if note is None:
        raise ValueError(NOTE_NOT_FOUND)
    return note


def list_notes(session: Session) -> Sequence[Note]:
    """Pinned note first, then the newest."""

    return NoteRepository(session).list()
