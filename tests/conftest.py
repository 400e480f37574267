"""
Shared fixtures: in-memory database wired into the app, users and tokens.
"""

import pytest
from fastapi.testclient import TestClient

from app.db.mongodb import get_mongo_db
from app.main import app
from tests.fakes import FakeDatabase
from tests.utils import make_user


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def client(db):
    app.dependency_overrides[get_mongo_db] = lambda: db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def entrepreneur(db):
    return make_user(db, "Asha Rao", "entrepreneur")


@pytest.fixture
def other_entrepreneur(db):
    return make_user(db, "Ravi Kumar", "entrepreneur")


@pytest.fixture
def member(db):
    return make_user(db, "Meera Singh", "user")


@pytest.fixture
def admin(db):
    return make_user(db, "Site Admin", "admin")
