"""SQLAlchemy models for notes and task comments."""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import expression

from teamboard.infrastructure.database import Base
from teamboard.utils import storage_now


class NoteModel(Base):
    """Database representation of a board note."""

    __tablename__ = "note"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    author_id = Column(String(40), nullable=False, index=True)
    author_name = Column(String(120), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    updated_at = Column(DateTime(), nullable=True)
    pinned = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


class TaskCommentModel(Base):
    """Database representation of a comment left on a task."""

    __tablename__ = "task_comment"
    __table_args__ = (Index("ix_task_comment_task_pinned", "task_id", "pinned"),)

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(String(40), nullable=False, index=True)
    content = Column(Text, nullable=False)
    author_id = Column(String(40), nullable=False)
    author_name = Column(String(120), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    updated_at = Column(DateTime(), nullable=True)
    pinned = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


__all__ = ["NoteModel", "TaskCommentModel"]
