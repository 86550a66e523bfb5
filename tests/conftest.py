import os
from pathlib import Path

# Must be set before anything under app/ loads its config
os.environ.setdefault("DICTIONARY_CONFIG", str(Path(__file__).parent / "config.toml"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import create_engine  # noqa: E402

from app.core import DictionaryController, DictionaryService  # noqa: E402
from app.main import create_app  # noqa: E402
from app.shared.db import init_db  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield init_db(engine)
    engine.dispose()


@pytest.fixture
def service(engine):
    return DictionaryService(engine)


@pytest.fixture
def controller(service):
    return DictionaryController(service)


@pytest.fixture
def client(service):
    with TestClient(create_app(service)) as client:
        yield client
