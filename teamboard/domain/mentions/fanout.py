"""Recipients of the mention notifications produced by a content save."""

from __future__ import annotations

from .codec import extract_target_ids


def resolve_fanout(content: str | None, author_id: str | None) -> set[str]:
    """Members mentioned in ``content`` other than its author."""

    return extract_target_ids(content) - {author_id}


__all__ = ["resolve_fanout"]
