"""Endpoints for comments on tasks."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from teamboard.application.use_cases.task_comments import (
    COMMENT_NOT_FOUND,
    create_task_comment,
    delete_task_comment,
    list_task_comments,
    set_pinned_task_comment,
    update_task_comment,
)
from teamboard.domain.entities import Member, TaskComment
from teamboard.domain.mentions import has_mentions
from teamboard.infrastructure.database import get_db
from teamboard.interfaces.api.dependencies import get_current_member
from teamboard.interfaces.api.schemas import ContentWrite, PinRequest, TaskCommentRead
from teamboard.utils import localize

router = APIRouter(prefix="/tasks/{task_id}/comments", tags=["task comments"])


def _to_read_model(comment: TaskComment) -> TaskCommentRead:
    return TaskCommentRead(
        id=comment.id or 0,
        task_id=comment.task_id,
        content=comment.content,
        author_id=comment.author_id,
        author_name=comment.author_name,
        created_at=localize(comment.created_at),
        updated_at=localize(comment.updated_at),
        pinned=comment.pinned,
        has_mentions=has_mentions(comment.content),
    )


def _raise_for(exc: ValueError) -> None:
    detail = str(exc)
    status_code = status.HTTP_400_BAD_REQUEST
    if detail == COMMENT_NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND
    raise HTTPException(status_code=status_code, detail=detail) from exc


@router.get("/", response_model=list[TaskCommentRead])
def list_comments(task_id: str, db: Session = Depends(get_db)) -> list[TaskCommentRead]:
    return [_to_read_model(comment) for comment in list_task_comments(db, task_id)]


@router.post("/", response_model=TaskCommentRead, status_code=status.HTTP_201_CREATED)
def create_comment(
    task_id: str,
    payload: ContentWrite,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> TaskCommentRead:
    try:
        comment = create_task_comment(
            db, task_id, content=payload.content, author=current_member
        )
    except ValueError as exc:
        _raise_for(exc)
    return _to_read_model(comment)


@router.put("/pin", response_model=TaskCommentRead | None)
def pin_comment(
    task_id: str,
    payload: PinRequest,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> TaskCommentRead | None:
    try:
        comment = set_pinned_task_comment(db, task_id, payload.target_id)
    except ValueError as exc:
        _raise_for(exc)
    return _to_read_model(comment) if comment else None


@router.put("/{comment_id}", response_model=TaskCommentRead)
def update_comment(
    task_id: str,
    comment_id: int,
    payload: ContentWrite,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> TaskCommentRead:
    try:
        comment = update_task_comment(
            db, task_id, comment_id, content=payload.content, editor=current_member
        )
    except ValueError as exc:
        _raise_for(exc)
    return _to_read_model(comment)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    task_id: str,
    comment_id: int,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_member),
) -> Response:
    try:
        delete_task_comment(db, task_id, comment_id)
    except ValueError as exc:
        _raise_for(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
