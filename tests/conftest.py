# File: tests/conftest.py

import os

# accounts_api.main builds a module-level app from the environment on import.
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient

from accounts_api.core.config import Settings
from accounts_api.db.init_db import init_db
from accounts_api.db.session import create_db_engine, create_session_factory
from accounts_api.main import create_application
from accounts_api.services.account_service import AccountService
from accounts_api.services.user_store import UserStore

TEST_SECRET = "test-secret"


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db) -> UserStore:
    return UserStore(db)


@pytest.fixture
def service(store) -> AccountService:
    return AccountService(store, TEST_SECRET)


@pytest.fixture
def app():
    app = create_application(
        Settings(jwt_secret=TEST_SECRET, database_url="sqlite://", create_tables=True)
    )
    return app


@pytest.fixture
def client(app):
    # entering the client runs startup, which creates the tables
    with TestClient(app) as client:
        yield client
