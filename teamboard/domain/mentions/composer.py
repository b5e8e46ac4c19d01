"""Interactive composition of mentions in a text input.

:class:`MentionComposer` is owned by the input component. It is fed every text
change and key press, keeps track of the ``@query`` being typed and of the
candidate members matching it, and produces the edit that inserts the chosen
member's canonical token.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union

from teamboard.domain.entities import Member

from .codec import TRIGGER, encode_mention

DEFAULT_CANDIDATE_LIMIT = 8
DEFAULT_BLUR_GRACE = 0.2

_BOUNDARIES = frozenset(" \n")

KEY_DOWN = "ArrowDown"
KEY_UP = "ArrowUp"
KEY_ESCAPE = "Escape"
COMMIT_KEYS = frozenset({"Enter", "Tab"})


@dataclass(frozen=True)
class Idle:
    """No mention is being typed."""


@dataclass(frozen=True)
class Composing:
    """A ``@query`` is being typed just before the cursor."""

    query_start: int
    query: str
    candidates: tuple[Member, ...] = ()
    highlight_index: int = 0

    @property
    def highlighted(self) -> Member | None:
        if not self.candidates:
            return None
        return self.candidates[self.highlight_index % len(self.candidates)]


ComposerState = Union[Idle, Composing]


@dataclass(frozen=True)
class MentionEdit:
    """Replacement text and caret position produced by a commit."""

    text: str
    cursor: int


@dataclass(frozen=True)
class KeyOutcome:
    """Result of a key press.

    ``handled`` tells the input to suppress the key's default behaviour.
    """

    handled: bool
    edit: MentionEdit | None = None


@dataclass(frozen=True)
class MentionRange:
    start: int
    query: str


def find_mention_range(text: str, cursor: int) -> MentionRange | None:
    """Locate the ``@query`` that ends at ``cursor``, if any."""

    cursor = max(0, min(cursor, len(text)))
    index = cursor - 1
    while index >= 0:
        char = text[index]
        if char in _BOUNDARIES:
            return None
        if char == TRIGGER:
            return MentionRange(start=index, query=text[index + 1 : cursor])
        index -= 1
    return None


def filter_candidates(
    members: Iterable[Member], query: str, *, limit: int = DEFAULT_CANDIDATE_LIMIT
) -> tuple[Member, ...]:
    """Members whose display name contains ``query`` (case-insensitive)."""

    needle = query.strip().lower()
    matches = [
        member
        for member in members
        if not needle or needle in member.display_name.lower()
    ]
    return tuple(matches[: max(limit, 0)])


@dataclass
class MentionComposer:
    """State machine driving the mention dropdown of one text input."""

    members: Sequence[Member] = ()
    limit: int = DEFAULT_CANDIDATE_LIMIT
    blur_grace: float = DEFAULT_BLUR_GRACE
    state: ComposerState = field(default_factory=Idle)
    text: str = ""
    cursor: int = 0
    _blur_handle: asyncio.TimerHandle | None = field(default=None, init=False, repr=False)

    @property
    def is_composing(self) -> bool:
        return isinstance(self.state, Composing)

    def set_members(self, members: Iterable[Member]) -> None:
        """Replace the directory snapshot and refresh the candidate list."""

        self.members = tuple(members)
        if isinstance(self.state, Composing):
            self._enter_composing(self.state.query_start, self.state.query)

    def on_text_change(self, text: str, cursor: int | None = None) -> ComposerState:
        """Track a new value of the input; ``cursor`` defaults to its end."""

        self.text = text
        self.cursor = len(text) if cursor is None else max(0, min(cursor, len(text)))
        mention_range = find_mention_range(self.text, self.cursor)
        if mention_range is None:
            self.state = Idle()
        else:
            self._enter_composing(mention_range.start, mention_range.query)
        return self.state

    def on_key(self, key: str) -> KeyOutcome:
        """Handle a key press while the dropdown may be open."""

        state = self.state
        if not isinstance(state, Composing):
            return KeyOutcome(handled=False)
        if key == KEY_ESCAPE:
            self.state = Idle()
            return KeyOutcome(handled=True)

        count = len(state.candidates)
        if count == 0:
            return KeyOutcome(handled=False)
        if key == KEY_DOWN:
            self._highlight((state.highlight_index + 1) % count)
            return KeyOutcome(handled=True)
        if key == KEY_UP:
            self._highlight((state.highlight_index - 1 + count) % count)
            return KeyOutcome(handled=True)
        if key in COMMIT_KEYS:
            return KeyOutcome(handled=True, edit=self.commit())
        return KeyOutcome(handled=False)

    def commit(self, candidate: Member | None = None) -> MentionEdit | None:
        """Insert ``candidate`` (default: the highlighted one) at the query.

        Returns ``None`` when there is nothing to commit.
        """

        state = self.state
        if not isinstance(state, Composing):
            return None
        member = candidate or state.highlighted
        if member is None:
            return None

        token = encode_mention(member.display_name, member.id) + " "
        start = min(state.query_start, len(self.text))
        end = max(start, self.cursor)
        text = self.text[:start] + token + self.text[end:]
        edit = MentionEdit(text=text, cursor=start + len(token))

        self.text = edit.text
        self.cursor = edit.cursor
        self.state = Idle()
        self._cancel_blur()
        return edit

    def dismiss(self) -> None:
        """Close the dropdown without touching the content."""

        self._cancel_blur()
        self.state = Idle()

    def on_blur(self) -> None:
        """Close after ``blur_grace`` so a click on a candidate still lands."""

        self._cancel_blur()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.state = Idle()
            return
        self._blur_handle = loop.call_later(self.blur_grace, self._blur_elapsed)

    def on_focus(self) -> None:
        self._cancel_blur()

    def close(self) -> None:
        """Release the pending blur timer; call when the input is torn down."""

        self.dismiss()

    def _blur_elapsed(self) -> None:
        self._blur_handle = None
        self.state = Idle()

    def _cancel_blur(self) -> None:
        if self._blur_handle is not None:
            self._blur_handle.cancel()
            self._blur_handle = None

    def _enter_composing(self, query_start: int, query: str) -> None:
        candidates = filter_candidates(self.members, query, limit=self.limit)
        previous = self.state
        highlight = 0
        if isinstance(previous, Composing) and previous.candidates == candidates:
            highlight = previous.highlight_index
        self.state = Composing(
            query_start=query_start,
            query=query,
            candidates=candidates,
            highlight_index=highlight,
        )

    def _highlight(self, index: int) -> None:
        state = self.state
        if isinstance(state, Composing):
            self.state = Composing(
                query_start=state.query_start,
                query=state.query,
                candidates=state.candidates,
                highlight_index=index,
            )


__all__ = [
    "COMMIT_KEYS",
    "Composing",
    "ComposerState",
    "DEFAULT_BLUR_GRACE",
    "DEFAULT_CANDIDATE_LIMIT",
    "Idle",
    "KEY_DOWN",
    "KEY_ESCAPE",
    "KEY_UP",
    "KeyOutcome",
    "MentionComposer",
    "MentionEdit",
    "MentionRange",
    "filter_candidates",
    "find_mention_range",
]
