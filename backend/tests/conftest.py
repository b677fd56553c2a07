import os

# settings are read on first import of infra_api
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import infra_api.db.models  # noqa: F401
from infra_api.core.deps import get_db
from infra_api.db.base import Base
from infra_api.db.session import make_engine
from infra_api.main import create_app
from infra_api.services.profanity import ProfanityFilter


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture(scope="session")
def profanity():
    return ProfanityFilter(extra_words=["frack"])


@pytest.fixture
def client(session_factory, profanity):
    app = create_app(profanity_filter=profanity)

    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c


def project_payload(**overrides) -> dict:
    data = {
        "name": "Bridge",
        "budget": 1000.5,
        "status": "planning",
        "province": "Ontario",
        "city": "Ottawa",
        "latitude": 45.4,
        "longitude": -75.7,
    }
    data.update(overrides)
    return data
