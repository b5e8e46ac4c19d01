"""Use cases for the member directory."""

from .directory import (
    MEMBER_NOT_FOUND,
    get_member,
    list_members,
    mentionable_members,
    register_member,
)

__all__ = [
    "MEMBER_NOT_FOUND",
    "get_member",
    "list_members",
    "mentionable_members",
    "register_member",
]
