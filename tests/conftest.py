# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from loguru import logger
from sqlalchemy.orm import sessionmaker

from bookstore.db.database import build_engine, get_db, init_db
from bookstore.main import app
from bookstore.services.database_service import DatabaseService


@pytest.fixture
def engine():
    """A brand-new in-memory SQLite database, with foreign keys enforced, per test."""
    test_engine = build_engine("sqlite://")
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()


@pytest.fixture
def db_service(session):
    return DatabaseService(db_session=session)


@pytest.fixture
def client(engine):
    """A TestClient whose requests each get their own session on the test database."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: the lifespan would initialise the real database.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def log_messages():
    """Collects every loguru message at ERROR level or above."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="ERROR", format="{message}")
    yield messages
    logger.remove(handler_id)
