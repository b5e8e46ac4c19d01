"""Use case for editing the content of a note."""

from sqlalchemy.orm import Session

from teamboard.application.use_cases.notifications import fan_out_mentions
from teamboard.domain.entities import Member, Note
from teamboard.infrastructure.repositories import NoteRepository

from .create_note import note_link
from .get_note import NOTE_NOT_FOUND
from .validators import normalize_content


def update_note(session: Session, note_id: int, *, content: str, editor: Member) -> Note:
    """Replace the content of ``note_id``.

    Every member mentioned in the new content (other than the editor) is
    notified again, even if they were already mentioned before.
    """

    repository = NoteRepository(session)
    if repository.get(note_id) is None:
        raise ValueError(NOTE_NOT_FOUND)

    updated = repository.update_content(note_id, normalize_content(content))
    fan_out_mentions(
        session,
        content=updated.content,
        author_id=editor.id,
        title=f"{editor.display_name} mentioned you in a note",
        link=note_link(updated.id),
    )
    return updated
