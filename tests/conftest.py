"""Shared fixtures for the User Query API tests."""

import pytest
from fastapi.testclient import TestClient

from user_query_api.app.core.store import UserStore
from user_query_api.app.main import create_app
from user_query_api.app.schemas.user import User
from user_query_api.app.services.user_service import UserQueryService


@pytest.fixture
def seed_users():
    return [User(id="1", name="Alice"), User(id="2", name="Bob")]


@pytest.fixture
def store(seed_users):
    return UserStore(seed_users)


@pytest.fixture
def empty_store():
    return UserStore([])


@pytest.fixture
def service(store):
    return UserQueryService(store)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def empty_client(empty_store):
    with TestClient(create_app(empty_store)) as test_client:
        yield test_client
