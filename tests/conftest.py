"""
Shared fixtures: every test gets its own SQLite file under ``tmp_path``.
"""

import pytest
from fastapi.testclient import TestClient

from user_api.app.core.config import Settings
from user_api.app.core.db import Database, init_db
from user_api.app.main import create_app
from user_api.app.repositories.user_repository import UserRepository
from user_api.app.services.user_service import UserService


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=str(tmp_path / "users.db"), api_prefix="")


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'repo.db'}")
    init_db(db)
    yield db
    db.dispose()


@pytest.fixture
def repository(database):
    return UserRepository(database)


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan handler, which creates tables.
    with TestClient(app) as test_client:
        yield test_client
