"""Pydantic models for member directory payloads."""

from pydantic import BaseModel, Field


class MemberRead(BaseModel):
    id: str
    display_name: str
    email: str | None = None


class MemberRegister(BaseModel):
    """Payload to add a member to the directory."""

    id: str = Field(..., min_length=1, max_length=40)
    display_name: str = Field(..., min_length=1, max_length=120)
    email: str | None = Field(default=None, max_length=120)


__all__ = ["MemberRead", "MemberRegister"]
