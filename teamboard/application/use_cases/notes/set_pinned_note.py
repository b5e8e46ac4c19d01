"""Use case for pinning a note."""

from sqlalchemy.orm import Session

from teamboard.domain.entities import Note
from teamboard.infrastructure.repositories import NoteRepository

from .get_note import NOTE_NOT_FOUND


def set_pinned_note(session: Session, note_id: int | None) -> Note | None:
    """Pin ``note_id`` and unpin any other note; ``None`` unpins all.

    Pinning is a metadata edit and sends no notifications.
    """

    repository = NoteRepository(session)
    try:
        repository.set_pinned(note_id)
    except ValueError as exc:
        raise ValueError(NOTE_NOT_FOUND) from exc
    return repository.get(note_id) if note_id is not None else None
