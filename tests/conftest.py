"""
Test configuration and fixtures for the shortener core.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from shortener_core.database.connection import Base

# Import models to ensure they're registered with Base
from shortener_core.models import URL  # noqa: F401

from tests.fakes import ScriptedIdSource, ScriptedWordSource

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def word_source():
    return ScriptedWordSource([["test", "words"]])


@pytest.fixture
def id_source():
    return ScriptedIdSource(["abcdefg"])
