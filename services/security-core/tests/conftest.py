"""
Shared fixtures: an in-memory SQLite store and an API client bound to it
"""
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_store
from app.core.config import Settings
from app.core.database import Base, make_engine
from app.main import create_app
from app.services.sql_store_client import SqlStoreClient


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's .env and store variables"""
    values = {
        "SUPABASE_URL": "",
        "SUPABASE_ANON_KEY": "",
        "SUPABASE_SERVICE_ROLE_KEY": "",
        "STORE_BACKEND": "rest",
        "DATABASE_URL": "",
        "ADMIN_EMAIL": "owner@example.com",
        "ADMIN_PASSWORD": "correct-horse-battery",
        "ADMIN_NAME": "Owner",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def engine():
    """Create test database engine"""
    engine = make_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return SqlStoreClient(engine)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def api(store, settings):
    """API client whose handlers all use the test store"""
    app = create_app(settings)
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
