import pytest
from fastapi.testclient import TestClient

from privachat.config import Settings
from privachat.main import create_app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'privachat_test.db'}"


@pytest.fixture
def settings(database_url):
    return Settings(database_url=database_url, rate_limit_enabled=False, log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
