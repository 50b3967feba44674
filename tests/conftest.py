"""Shared fixtures: an in-memory SQLite database and an API client bound to it."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import seed_database
from database.deps import get_db_read, get_db_write
from database.models import Base
from main import app


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def seeded_session(session):
    seed_database(session)
    return session


@pytest.fixture
def client(session_factory):
    """API client on a seeded in-memory DB (lifespan startup is not run)."""
    seed = session_factory()
    seed_database(seed)
    seed.close()

    def override_session():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db_write] = override_session
    app.dependency_overrides[get_db_read] = override_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
