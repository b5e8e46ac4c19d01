"""Domain entities for member notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Kinds of events a member can be notified about."""

    MENTION = "mention"
    TASK_ASSIGNED = "task_assigned"
    PROJECT_ADDED = "project_added"
    PROJECT_COMPLETED = "project_completed"
    PROJECT_REJECTED = "project_rejected"
    PROJECT_PENDING_APPROVAL = "project_pending_approval"


@dataclass
class Notification:
    """Information message kept in a single recipient's log."""

    id: int | None
    recipient_id: str
    type: NotificationType
    title: str
    link: str
    created_at: datetime | None = None
    read: bool = False


@dataclass(frozen=True)
class NotificationRetentionPolicy:
    """Soft bound applied to a recipient's log after every append.

    Once the log holds more than ``threshold`` entries it is pruned back to the
    ``keep`` most recent ones.
    """

    threshold: int = 100
    keep: int = 50

    def __post_init__(self) -> None:
        if self.keep <= 0 or self.threshold <= 0:
            raise ValueError("Retention limits must be positive")
        if self.keep > self.threshold:
            raise ValueError("keep must not exceed threshold")

    def needs_cleanup(self, size: int) -> bool:
        """Return ``True`` when a log of ``size`` entries must be pruned."""

        return size > self.threshold

    def eviction_count(self, size: int) -> int:
        """Number of oldest entries to drop from a log of ``size`` entries."""

        if not self.needs_cleanup(size):
            return 0
        return size - self.keep


__all__ = ["Notification", "NotificationRetentionPolicy", "NotificationType"]
