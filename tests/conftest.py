import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Keep the module-level engine away from any developer database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

from quiz_builder.core.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from quiz_builder.models.quiz_db.quiz_db import Quiz  # noqa: E402,F401


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine):
    from main import app

    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _get_test_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def geo_quiz_payload():
    return {
        "title": "Geo Quiz",
        "questions": [
            {"text": "Is Paris the capital of France?", "type": "BOOLEAN", "booleanAnswer": True},
        ],
    }


@pytest.fixture()
def mixed_quiz_payload():
    return {
        "title": "  General Knowledge  ",
        "questions": [
            {"text": "Water boils at 100C at sea level", "type": "BOOLEAN", "booleanAnswer": True},
            {"text": "Capital of Italy?", "type": "INPUT", "inputAnswer": "  Rome "},
            {
                "text": "Which are primes?",
                "type": "CHECKBOX",
                "options": [
                    {"text": "2", "isCorrect": True},
                    {"text": "4", "isCorrect": False},
                    {"text": "5", "isCorrect": True},
                ],
            },
        ],
    }
