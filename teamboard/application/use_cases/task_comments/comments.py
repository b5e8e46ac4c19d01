"""Create, edit, pin and delete comments left on a task."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamboard.application.use_cases.notes.validators import normalize_content
from teamboard.application.use_cases.notifications import fan_out_mentions
from teamboard.domain.entities import Member, TaskComment
from teamboard.infrastructure.repositories import TaskCommentRepository

COMMENT_NOT_FOUND = "Comment not found"


def _task_link(task_id: str) -> str:
    return f"/tasks?open={task_id}"


def _mention_title(author: Member) -> str:
    return f"{author.display_name} mentioned you in a task comment"


def list_task_comments(session: Session, task_id: str) -> Sequence[TaskComment]:
    return TaskCommentRepository(session).list_for_task(task_id)


def create_task_comment(
    session: Session, task_id: str, *, content: str, author: Member
) -> TaskComment:
    comment = TaskComment(
        id=None,
        task_id=task_id,
        content=normalize_content(content),
        author_id=author.id,
        author_name=author.display_name,
    )
    saved = TaskCommentRepository(session).create(comment)
    fan_out_mentions(
        session,
        content=saved.content,
        author_id=author.id,
        title=_mention_title(author),
        link=_task_link(task_id),
    )
    return saved


def update_task_comment(
    session: Session, task_id: str, comment_id: int, *, content: str, editor: Member
) -> TaskComment:
    repository = TaskCommentRepository(session)
    if repository.get(task_id, comment_id) is None:
        raise ValueError(COMMENT_NOT_FOUND)
    updated = repository.update_content(task_id, comment_id, normalize_content(content))
    fan_out_mentions(
        session,
        content=updated.content,
        author_id=editor.id,
        title=_mention_title(editor),
        link=_task_link(task_id),
    )
    return updated


def delete_task_comment(session: Session, task_id: str, comment_id: int) -> None:
    repository = TaskCommentRepository(session)
    if repository.get(task_id, comment_id) is None:
        raise ValueError(COMMENT_NOT_FOUND)
    repository.delete(task_id, comment_id)


def set_pinned_task_comment(
    session: Session, task_id: str, comment_id: int | None
) -> TaskComment | None:
    """Keep at most one pinned comment per task."""

    repository = TaskCommentRepository(session)
    try:
        repository.set_pinned(task_id, comment_id)
    except ValueError as exc:
        raise ValueError(COMMENT_NOT_FOUND) from exc
    return repository.get(task_id, comment_id) if comment_id is not None else None
