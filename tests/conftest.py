# File: tests/conftest.py

"""
Shared fixtures.

Every test gets its own in-memory SQLite database with the users table
created, so nothing leaks between tests and no server is needed.
"""

import os

# Must be set before qa_auth.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from qa_auth.db.session import get_db
from qa_auth.core.security import Sha256PasswordHasher
from qa_auth.db.init_db import drop_db, init_db
from qa_auth.db.session import build_engine
from qa_auth.main import app
from qa_auth.repositories.user_repository import SqlAlchemyUserRepository


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    drop_db(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def hasher():
    return Sha256PasswordHasher()


@pytest.fixture()
def user_repository(db_session):
    return SqlAlchemyUserRepository(db_session)


@pytest.fixture()
def client(db_session):
    """
    TestClient bound to the per-test database.

    Not used as a context manager, so the startup hook (which creates tables
    on the configured engine) does not run.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
