"""Persistence helpers for notes."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamboard.domain.entities import Note
from teamboard.infrastructure.models import NoteModel
from teamboard.utils import from_storage, storage_now, to_storage

from .common import apply_single_pin, store_operation


class NoteRepository:
    """Provide CRUD operations and the single-pin rule for :class:`Note`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Note]:
        """Return every note, pinned first, then newest first."""

        query = self.session.query(NoteModel).order_by(
            NoteModel.pinned.desc(), NoteModel.created_at.desc(), NoteModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def list_pinned(self) -> Sequence[Note]:
        query = self.session.query(NoteModel).filter(NoteModel.pinned.is_(True))
        return [self._to_entity(model) for model in query.all()]

    def get(self, note_id: int) -> Note | None:
        model = self.session.get(NoteModel, note_id)
        return self._to_entity(model) if model else None

    def create(self, note: Note) -> Note:
        model = NoteModel(
            content=note.content,
            author_id=note.author_id,
            author_name=note.author_name,
            created_at=to_storage(note.created_at) or storage_now(),
            pinned=False,
        )
        with store_operation(self.session, "create note"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update_content(self, note_id: int, content: str) -> Note:
        model = self.session.get(NoteModel, note_id)
        if model is None:
            raise ValueError(f"Note with id {note_id} not found")
        with store_operation(self.session, f"update note {note_id}"):
            model.content = content
            model.updated_at = storage_now()
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, note_id: int) -> None:
        model = self.session.get(NoteModel, note_id)
        if model is None:
            raise ValueError(f"Note with id {note_id} not found")
        with store_operation(self.session, f"delete note {note_id}"):
            self.session.delete(model)
            self.session.commit()

    def set_pinned(self, note_id: int | None) -> None:
        """Make ``note_id`` the only pinned note (``None`` unpins all)."""

        apply_single_pin(self.session, NoteModel, note_id)

    @staticmethod
    def _to_entity(model: NoteModel) -> Note:
        return Note(
            id=model.id,
            content=model.content,
            author_id=model.author_id,
            author_name=model.author_name,
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
            pinned=bool(model.pinned),
        )


__all__ = ["NoteRepository"]
