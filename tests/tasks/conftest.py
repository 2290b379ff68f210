# tests/tasks/conftest.py

import pytest
from fastapi.testclient import TestClient

from minimal_apis.tasks.db import Base, SessionLocal, engine, get_db
from minimal_apis.tasks.main import app


@pytest.fixture(scope="session", autouse=True)
def setup_tasks_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def db_session_for_test():
    """
    Transactional session per test, rolled back after the test completes.
    """
    connection = engine.connect()
    transaction = connection.begin()
    db = SessionLocal(bind=connection)

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    try:
        yield db
    finally:
        transaction.rollback()
        db.close()
        connection.close()
        app.dependency_overrides.pop(get_db, None)
