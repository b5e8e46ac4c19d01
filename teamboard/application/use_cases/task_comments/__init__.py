"""Use cases for comments on tasks."""

from .comments import (
    COMMENT_NOT_FOUND,
    create_task_comment,
    delete_task_comment,
    list_task_comments,
    set_pinned_task_comment,
    update_task_comment,
)

__all__ = [
    "COMMENT_NOT_FOUND",
    "create_task_comment",
    "delete_task_comment",
    "list_task_comments",
    "set_pinned_task_comment",
    "update_task_comment",
]
