"""Canonical encoding of member mentions inside free-form text.

A mention is stored as ``@[Display Name](member-id)``. Inside the name and the
id the characters ``\\``, ``[``, ``]``, ``(`` and ``)`` are backslash-escaped,
so a name can never close its own token and decoding never depends on the text
around a token.

Decoding is total: anything that starts like a token but does not complete
(missing id, unbalanced brackets, dangling escape) is kept as literal text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

TRIGGER = "@"
_ESCAPE = "\\"
_SPECIAL = frozenset("\\[]()")
_NAME_FORBIDDEN = frozenset("[]")
_ID_FORBIDDEN = frozenset("([]")


@dataclass(frozen=True)
class TextSegment:
    """A run of literal text."""

    text: str


@dataclass(frozen=True)
class MentionSegment:
    """A reference to a member by id, with the name shown when it was written."""

    display_name: str
    target_id: str


Segment = Union[TextSegment, MentionSegment]


def _escape(value: str) -> str:
    return "".join(_ESCAPE + char if char in _SPECIAL else char for char in value)


def encode_mention(display_name: str, target_id: str) -> str:
    """Return the canonical token for a mention of ``target_id``."""

    if not target_id or not target_id.strip():
        raise ValueError("A mention requires a target id")
    return f"{TRIGGER}[{_escape(display_name)}]({_escape(target_id)})"


def _scan_part(
    content: str, index: int, closing: str, forbidden: frozenset[str]
) -> tuple[str, int] | None:
    """Read an escaped run up to ``closing``.

    Returns the unescaped value and the index just past ``closing``, or
    ``None`` when the run is malformed.
    """

    chars: list[str] = []
    length = len(content)
    while index < length:
        char = content[index]
        if char == _ESCAPE:
            if index + 1 >= length:
                return None
            chars.append(content[index + 1])
            index += 2
            continue
        if char == closing:
            return "".join(chars), index + 1
        if char in forbidden:
            return None
        chars.append(char)
        index += 1
    return None


def _match_token(content: str, start: int) -> tuple[MentionSegment, int] | None:
    """Try to read a full token starting at ``start`` (which holds ``@``)."""

    if not content.startswith("[", start + 1):
        return None
    name_part = _scan_part(content, start + 2, "]", _NAME_FORBIDDEN)
    if name_part is None:
        return None
    name, index = name_part
    if not content.startswith("(", index):
        return None
    id_part = _scan_part(content, index + 1, ")", _ID_FORBIDDEN)
    if id_part is None:
        return None
    target_id, end = id_part
    if not target_id.strip():
        logger.debug("Mention token without target id kept as text at %s", start)
        return None
    return MentionSegment(display_name=name, target_id=target_id), end


def decode_content(content: str | None) -> list[Segment]:
    """Split canonical ``content`` into literal and mention segments.

    Content without mentions (including ``""``) yields a single
    :class:`TextSegment` equal to the input. Never raises.
    """

    text = content if isinstance(content, str) else ""
    segments: list[Segment] = []
    literal_start = 0
    index = text.find(TRIGGER)
    while index != -1:
        matched = _match_token(text, index)
        if matched is None:
            index = text.find(TRIGGER, index + 1)
            continue
        mention, end = matched
        if index > literal_start:
            segments.append(TextSegment(text[literal_start:index]))
        segments.append(mention)
        literal_start = end
        index = text.find(TRIGGER, end)

    if literal_start < len(text) or not segments:
        segments.append(TextSegment(text[literal_start:]))
    return segments


def extract_target_ids(content: str | None) -> set[str]:
    """Return the distinct member ids mentioned in ``content``."""

    return {
        segment.target_id
        for segment in decode_content(content)
        if isinstance(segment, MentionSegment)
    }


def has_mentions(content: str | None) -> bool:
    """Return ``True`` when ``content`` holds at least one mention."""

    return any(isinstance(segment, MentionSegment) for segment in decode_content(content))


def to_plain_text(content: str | None) -> str:
    """Render ``content`` with mentions shown as ``@Name``."""

    parts: list[str] = []
    for segment in decode_content(content):
        if isinstance(segment, MentionSegment):
            parts.append(f"{TRIGGER}{segment.display_name or 'member'}")
        else:
            parts.append(segment.text)
    return "".join(parts)


__all__ = [
    "MentionSegment",
    "Segment",
    "TextSegment",
    "decode_content",
    "encode_mention",
    "extract_target_ids",
    "has_mentions",
    "to_plain_text",
]
