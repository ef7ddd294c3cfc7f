import os

# Settings are read at import time, so the environment has to be ready first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DEFAULT_SETUP_KEY"] = "changeme"
for var in ("RESEND_API_KEY", "EMAIL_SERVICE_URL", "SMTP_HOST"):
    os.environ.pop(var, None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import portfolio_cms.models  # noqa: F401
from portfolio_cms.database import Base, get_db
from portfolio_cms.main import app

ADMIN = {
    "username": "admin1",
    "email": "a@x.com",
    "password": "secret1",
    "isAdmin": True,
    "setupKey": "changeme",
}

USER = {
    "username": "visitor",
    "email": "visitor@x.com",
    "password": "secret2",
}


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def make_client(session_factory):
    """Each call returns a client with its own cookie jar, sharing the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield lambda: TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def client(make_client):
    return make_client()


@pytest.fixture()
def admin_client(make_client):
    c = make_client()
    r = c.post("/api/register", json=ADMIN)
    assert r.status_code == 201, r.text
    return c


@pytest.fixture()
def user_client(admin_client, make_client):
    c = make_client()
    r = c.post("/api/register", json=USER)
    assert r.status_code == 201, r.text
    return c
