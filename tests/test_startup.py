import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from product_api.api import create_app
from product_api.data import database
from product_api.data.database import create_db_engine, init_db


def test_init_db_raises_when_database_unreachable(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'missing' / 'products.db'}")

    with pytest.raises(OperationalError):
        init_db(engine, attempts=1)


def test_startup_aborts_when_database_unreachable(tmp_path):
    app = create_app(
        database_url=f"sqlite:///{tmp_path / 'missing' / 'products.db'}",
        connect_attempts=1,
    )

    with pytest.raises(OperationalError):
        with TestClient(app):
            pass


def test_init_db_retries_connection(monkeypatch):
    calls = []
    real_ping = database.ping

    def flaky_ping(engine):
        calls.append(engine)
        if len(calls) == 1:
            raise OperationalError("SELECT 1", {}, Exception("not yet"))
        real_ping(engine)

    monkeypatch.setattr(database, "ping", flaky_ping)
    engine = create_db_engine("sqlite://")

    init_db(engine, attempts=2)

    assert len(calls) == 2


def test_file_database_persists_between_apps(tmp_path):
    url = f"sqlite:///{tmp_path / 'products.db'}"

    with TestClient(create_app(database_url=url, connect_attempts=1)) as client:
        client.post("/product", json={"name": "kept", "price": 2.5})

    with TestClient(create_app(database_url=url, connect_attempts=1)) as client:
        assert client.get("/product/1").json() == {"id": 1, "name": "kept", "price": 2.5}
