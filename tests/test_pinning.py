"""Tests for the single-pin rule on notes and task comments."""

import pytest
from sqlalchemy import event
from sqlalchemy.orm import sessionmaker

from teamboard.application.use_cases.notes import (
    NOTE_NOT_FOUND,
    NOTE_PINNED,
    create_note,
    delete_note,
    list_notes,
    set_pinned_note,
)
from teamboard.application.use_cases.task_comments import (
    COMMENT_NOT_FOUND,
    create_task_comment,
    list_task_comments,
    set_pinned_task_comment,
)
from teamboard.domain.entities import Note
from teamboard.infrastructure.database import build_engine, initialize_database
from teamboard.infrastructure.repositories import NoteRepository, NotificationRepository


def _notes(session, author, count):
    return [create_note(session, content=f"note {i}", author=author) for i in range(count)]


def test_pinning_moves_the_pin(session, members):
    first, second, third = _notes(session, members["A1"], 3)

    set_pinned_note(session, first.id)
    pinned = set_pinned_note(session, third.id)

    assert pinned.pinned is True
    assert [n.id for n in NoteRepository(session).list_pinned()] == [third.id]
    assert list_notes(session)[0].id == third.id


def test_pinning_same_note_twice_is_stable(session, members):
    (note,) = _notes(session, members["A1"], 1)

    set_pinned_note(session, note.id)
    set_pinned_note(session, note.id)

    assert [n.id for n in NoteRepository(session).list_pinned()] == [note.id]


def test_unpin_all(session, members):
    (note,) = _notes(session, members["A1"], 1)
    set_pinned_note(session, note.id)

    assert set_pinned_note(session, None) is None
    assert NoteRepository(session).list_pinned() == []


def test_pinning_unknown_note_keeps_current_pin(session, members):
    (note,) = _notes(session, members["A1"], 1)
    set_pinned_note(session, note.id)

    with pytest.raises(ValueError, match=NOTE_NOT_FOUND):
        set_pinned_note(session, 999)

    assert [n.id for n in NoteRepository(session).list_pinned()] == [note.id]


def test_pinning_sends_no_notifications(session, members):
    note = create_note(session, content="hi @[Bob](B1)", author=members["A1"])

    set_pinned_note(session, note.id)

    assert NotificationRepository(session).count("B1") == 1


def test_pinned_note_cannot_be_deleted(session, members):
    (note,) = _notes(session, members["A1"], 1)
    set_pinned_note(session, note.id)

    with pytest.raises(ValueError, match=NOTE_PINNED):
        delete_note(session, note.id)

    set_pinned_note(session, None)
    delete_note(session, note.id)
    assert list_notes(session) == []


def test_comment_pin_is_scoped_per_task(session, members):
    author = members["B1"]
    a1 = create_task_comment(session, "T1", content="first", author=author)
    a2 = create_task_comment(session, "T1", content="second", author=author)
    b1 = create_task_comment(session, "T2", content="other task", author=author)

    set_pinned_task_comment(session, "T1", a1.id)
    set_pinned_task_comment(session, "T2", b1.id)
    set_pinned_task_comment(session, "T1", a2.id)

    t1 = list_task_comments(session, "T1")
    t2 = list_task_comments(session, "T2")
    assert [(c.id, c.pinned) for c in t1] == [(a2.id, True), (a1.id, False)]
    assert [(c.id, c.pinned) for c in t2] == [(b1.id, True)]


def test_comment_pin_rejects_comment_from_other_task(session, members):
    other = create_task_comment(session, "T2", content="elsewhere", author=members["B1"])

    with pytest.raises(ValueError, match=COMMENT_NOT_FOUND):
        set_pinned_task_comment(session, "T1", other.id)


def test_concurrent_pins_leave_one_pinned_note(tmp_path):
    file_engine = build_engine(f"sqlite:///{tmp_path / 'pins.db'}")
    initialize_database(bind=file_engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)
    first, second = factory(), factory()
    try:
        repository = NoteRepository(first)
        x, y = (
            repository.create(Note(id=None, content=text, author_id="A1", author_name="A"))
            for text in ("x", "y")
        )
        interleaved = []

        @event.listens_for(file_engine, "before_cursor_execute")
        def pin_other_note_first(conn, cursor, statement, parameters, context, executemany):
            if interleaved or not statement.lstrip().upper().startswith("UPDATE NOTE"):
                return
            interleaved.append(statement)
            NoteRepository(second).set_pinned(y.id)

        repository.set_pinned(x.id)
        event.remove(file_engine, "before_cursor_execute", pin_other_note_first)

        assert interleaved
        first.expire_all()
        assert [note.id for note in NoteRepository(first).list_pinned()] == [x.id]
    finally:
        first.close()
        second.close()
        file_engine.dispose()
