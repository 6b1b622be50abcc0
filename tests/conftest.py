import os

# Must be set before school_admin.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from school_admin.api.deps import get_school_repository
from school_admin.core.database import SessionLocal, create_database_tables, drop_database_tables
from school_admin.main import app
from school_admin.services.school.repository import SchoolRepository


@pytest.fixture()
def db():
    create_database_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_database_tables()


@pytest.fixture()
def repository():
    return SchoolRepository()


@pytest.fixture()
def client(db):
    # No context manager: the startup hook (connection retries, create_all) is covered separately
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def failing_client(db):
    class BrokenRepository(SchoolRepository):
        def get_common_students(self, db, teacher_emails):
            raise RuntimeError("connection to server at 10.0.0.5 failed: password authentication failed")

    app.dependency_overrides[get_school_repository] = lambda: BrokenRepository()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
