"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from silenum import models  # noqa: F401  registers tables on Base.metadata
from silenum.database import Base
from silenum.infrastructure.library.repositories import BookRepository, TagRepository

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def book_repository(db_session: Session) -> BookRepository:
    return BookRepository(db_session)


@pytest.fixture
def tag_repository(db_session: Session) -> TagRepository:
    return TagRepository(db_session)
