"""Use case for deleting notes."""

from sqlalchemy.orm import Session

from teamboard.infrastructure.repositories import NoteRepository

from .get_note import NOTE_NOT_FOUND

NOTE_PINNED = "Unpin the note before deleting it"


def delete_note(session: Session, note_id: int) -> None:
    """Delete an unpinned note."""

    repository = NoteRepository(session)
    note = repository.get(note_id)
    if note is None:
        raise ValueError(NOTE_NOT_FOUND)
    if note.pinned:
        raise ValueError(NOTE_PINNED)
    repository.delete(note_id)
