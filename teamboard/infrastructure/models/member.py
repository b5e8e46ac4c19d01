"""SQLAlchemy model for the member directory."""

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from teamboard.infrastructure.database import Base


class MemberModel(Base):
    """Database representation of a team member."""

    __tablename__ = "member"

    id = Column(String(40), primary_key=True)
    display_name = Column(String(120), nullable=False)
    email = Column(String(120), nullable=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)

    notifications = relationship(
        "NotificationModel",
        back_populates="recipient",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["MemberModel"]
