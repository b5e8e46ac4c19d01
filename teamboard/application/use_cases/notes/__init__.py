"""Use cases for managing notes."""

from .create_note import create_note
from .delete_note import NOTE_PINNED, delete_note
from .get_note import NOTE_NOT_FOUND, get_note, list_notes
from .set_pinned_note import set_pinned_note
from .update_note import update_note

__all__ = [
    "NOTE_NOT_FOUND",
    "NOTE_PINNED",
    "create_note",
    "delete_note",
    "get_note",
    "list_notes",
    "set_pinned_note",
    "update_note",
]
