"""Mention encoding, composition and fan-out resolution."""

from .codec import (
    MentionSegment,
    Segment,
    TextSegment,
    decode_content,
    encode_mention,
    extract_target_ids,
    has_mentions,
    to_plain_text,
)
from .composer import (
    Composing,
    ComposerState,
    Idle,
    KeyOutcome,
    MentionComposer,
    MentionEdit,
    filter_candidates,
    find_mention_range,
)
from .fanout import resolve_fanout

__all__ = [
    "Composing",
    "ComposerState",
    "Idle",
    "KeyOutcome",
    "MentionComposer",
    "MentionEdit",
    "MentionSegment",
    "Segment",
    "TextSegment",
    "decode_content",
    "encode_mention",
    "extract_target_ids",
    "filter_candidates",
    "find_mention_range",
    "has_mentions",
    "resolve_fanout",
    "to_plain_text",
]
