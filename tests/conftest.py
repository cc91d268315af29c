import os

# Must be set before student_api is imported: the engine is built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient

from student_api.core.database import SessionLocal, create_database_tables, drop_database_tables
from student_api.main import app


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh students table for every test."""
    create_database_tables()
    yield
    drop_database_tables()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def alice():
    return {"name": "Alice", "course": "CS", "email": "a@x.com", "phone": "1234567890"}
