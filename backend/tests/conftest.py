from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from app.core.config import Settings, settings
from app.db import create_db_engine, create_session_factory, init_db
from app.main import create_app
from app.repositories.hikes import HikeRepository
from app.stores.sql import SqlHikeStore


@pytest.fixture(autouse=True)
def utc_timezone(monkeypatch):
    # Timestamp dates resolve to the same day on every test machine
    monkeypatch.setattr(settings, "timezone", "UTC")


@pytest.fixture()
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'hikes.db'}"


@pytest.fixture()
def engine(database_url: str) -> Generator[Engine, None, None]:
    engine = create_db_engine(database_url)
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def store(engine: Engine) -> SqlHikeStore:
    return SqlHikeStore(create_session_factory(engine))


@pytest.fixture()
def repo(store: SqlHikeStore) -> HikeRepository:
    return HikeRepository(store)


@pytest.fixture()
def client(database_url: str) -> Generator[TestClient, None, None]:
    app = create_app(Settings(database_url=database_url, log_level="WARNING"))
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def ridge_trail() -> dict:
    return {
        "name": "Ridge Trail",
        "location": "Blue Mountains",
        "date": "2024-03-01",
        "parking": "Yes",
        "length": 5.2,
        "difficulty": "Moderate",
    }
