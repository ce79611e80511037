import os

# Must be set before bizdirectory.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BUSINESS_DELETE_PASSWORD"] = "0102"
os.environ["DEFAULT_ADMIN_USERNAME"] = ""
os.environ["DEFAULT_ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient

from bizdirectory.core.dependencies import get_session_registry
from bizdirectory.core.sessions import SessionRegistry
from bizdirectory.crud import admins as admins_crud
from bizdirectory.database import Base, SessionLocal, engine
from main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correctpass"


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def registry():
    return SessionRegistry()


@pytest.fixture
def client(registry):
    app.dependency_overrides[get_session_registry] = lambda: registry
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return admins_crud.create_admin_user(db, ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def admin_headers(client, admin):
    r = client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['token']}"}
