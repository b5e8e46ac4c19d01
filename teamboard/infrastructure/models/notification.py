"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from teamboard.infrastructure.database import Base
from teamboard.utils import storage_now


class NotificationModel(Base):
    """A notification stored under its recipient."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_created", "recipient_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    recipient_id = Column(
        String(40), ForeignKey("member.id", ondelete="CASCADE"), nullable=False
    )
    type = Column(String(40), nullable=False)
    title = Column(String(255), nullable=False)
    link = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    read = Column(Boolean, nullable=False, default=False, server_default=expression.false())

    recipient = relationship("MemberModel", back_populates="notifications")


__all__ = ["NotificationModel"]
