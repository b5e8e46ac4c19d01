"""Shared fixtures: an in-memory database seeded with a few members."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"

from sqlalchemy.orm import sessionmaker

from teamboard.domain.entities import Member
from teamboard.infrastructure.database import build_engine, initialize_database
from teamboard.infrastructure.repositories import MemberRepository

MEMBERS = [
    Member(id="A1", display_name="Alice Admin"),
    Member(id="B1", display_name="Bob"),
    Member(id="J1", display_name="Jane Doe"),
    Member(id="J2", display_name="James Lee"),
    Member(id="M1", display_name="Amy Chen"),
]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def engine():
    test_engine = build_engine("sqlite://")
    initialize_database(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def members(session):
    repository = MemberRepository(session)
    return {member.id: repository.upsert(member) for member in MEMBERS}


@pytest.fixture()
def client(session_factory, members, monkeypatch):
    """Test client bound to the in-memory database."""

    from fastapi.testclient import TestClient

    from main import create_app
    from teamboard.infrastructure import database
    from teamboard.infrastructure.database import get_db

    monkeypatch.setattr(database, "SessionLocal", session_factory)
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
