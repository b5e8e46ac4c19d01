"""Domain entity representing a team member."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Directory entry that can be mentioned and notified."""

    id: str
    display_name: str
    email: str | None = None
    is_active: bool = True
