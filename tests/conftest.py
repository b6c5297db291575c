import pytest
from fastapi.testclient import TestClient

from inventory_api.config import Settings
from inventory_api.database import Base, Database
from inventory_api.main import create_app


# Test database (SQLite in-memory, one shared connection)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


def make_settings(**overrides) -> Settings:
    """Build settings for an isolated test application."""
    values = {
        "DATABASE_URL": SQLALCHEMY_DATABASE_URL,
        "SEED_SAMPLE_DATA": False,
        "STATIC_DIR": "does-not-exist",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(scope="function")
def client():
    """Create test client with an empty products table for each test."""
    app = create_app(make_settings())

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def seeded_client():
    """Create test client whose products table holds the sample rows."""
    app = create_app(make_settings(SEED_SAMPLE_DATA=True))

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def database():
    """Open a fresh in-memory database with the schema created."""
    db = Database(SQLALCHEMY_DATABASE_URL).open()
    db.create_all(Base.metadata)

    yield db

    db.close()
