"""Fixtures for the product service tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from product_api.api import create_app
from product_api.data.database import create_db_engine, init_db

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(name="app")
def app_fixture():
    """Fresh app with its own in-memory database."""
    return create_app(database_url=TEST_DATABASE_URL, connect_attempts=1)


@pytest.fixture(name="client")
def client_fixture(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session() -> Generator[Session, None, None]:
    engine = create_db_engine(TEST_DATABASE_URL)
    init_db(engine)
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()


@pytest.fixture
def add_products(client):
    def _add(n: int):
        created = []
        for i in range(n):
            resp = client.post("/product", json={"name": f"Product {i}", "price": (i + 1.0) * 10})
            assert resp.status_code == 201
            created.append(resp.json())
        return created

    return _add
