# tests/catalog/conftest.py

"""
Fixtures for the catalog service tests.
Each test runs within its own database transaction, rolled back afterwards.
"""

import pytest
from fastapi.testclient import TestClient

from minimal_apis.catalog.db import Base, SessionLocal, engine, get_db
from minimal_apis.catalog.main import app


@pytest.fixture(scope="session", autouse=True)
def setup_catalog_database():
    # Start from a clean slate for the session
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="module")
def client():
    """
    TestClient for the catalog app; it runs the app's startup events.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def db_session_for_test():
    """
    Provides a transactional database session for each test function and
    overrides the app's `get_db` dependency with it. Everything the test
    writes is rolled back when it finishes.
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


@pytest.fixture
def auth_headers(client: TestClient):
    response = client.post("/login", json={"username": "macoratti", "password": "numsey#123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def category(client: TestClient):
    response = client.post(
        "/categorias",
        json={"name": "Bebidas", "description": "Bebidas em geral"},
    )
    assert response.status_code == 201
    return response.json()
