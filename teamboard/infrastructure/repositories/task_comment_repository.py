"""Persistence helpers for task comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamboard.domain.entities import TaskComment
from teamboard.infrastructure.models import TaskCommentModel
from teamboard.utils import from_storage, storage_now, to_storage

from .common import apply_single_pin, store_operation


class TaskCommentRepository:
    """CRUD for comments, always scoped to one task."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_task(self, task_id: str) -> Sequence[TaskComment]:
        query = (
            self.session.query(TaskCommentModel)
            .filter(TaskCommentModel.task_id == task_id)
            .order_by(
                TaskCommentModel.pinned.desc(),
                TaskCommentModel.created_at.asc(),
                TaskCommentModel.id.asc(),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, task_id: str, comment_id: int) -> TaskComment | None:
        model = self._get_model(task_id, comment_id)
        return self._to_entity(model) if model else None

    def create(self, comment: TaskComment) -> TaskComment:
        model = TaskCommentModel(
            task_id=comment.task_id,
            content=comment.content,
            author_id=comment.author_id,
            author_name=comment.author_name,
            created_at=to_storage(comment.created_at) or storage_now(),
            pinned=False,
        )
        with store_operation(self.session, f"comment on task {comment.task_id}"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update_content(self, task_id: str, comment_id: int, content: str) -> TaskComment:
        model = self._get_model(task_id, comment_id)
        if model is None:
            raise ValueError(f"Comment with id {comment_id} not found")
        with store_operation(self.session, f"update comment {comment_id}"):
            model.content = content
            model.updated_at = storage_now()
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, task_id: str, comment_id: int) -> None:
        model = self._get_model(task_id, comment_id)
        if model is None:
            raise ValueError(f"Comment with id {comment_id} not found")
        with store_operation(self.session, f"delete comment {comment_id}"):
            self.session.delete(model)
            self.session.commit()

    def set_pinned(self, task_id: str, comment_id: int | None) -> None:
        """Make ``comment_id`` the only pinned comment of ``task_id``."""

        apply_single_pin(
            self.session,
            TaskCommentModel,
            comment_id,
            TaskCommentModel.task_id == task_id,
        )

    def _get_model(self, task_id: str, comment_id: int) -> TaskCommentModel | None:
        return (
            self.session.query(TaskCommentModel)
            .filter(TaskCommentModel.id == comment_id, TaskCommentModel.task_id == task_id)
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: TaskCommentModel) -> TaskComment:
        return TaskComment(
            id=model.id,
            task_id=model.task_id,
            content=model.content,
            author_id=model.author_id,
            author_name=model.author_name,
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
            pinned=bool(model.pinned),
        )


__all__ = ["TaskCommentRepository"]
