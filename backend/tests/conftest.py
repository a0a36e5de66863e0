"""
Pytest configuration and fixtures for backend tests.
"""

import io

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

from inventory_api.main import create_app
from inventory_api.models import Ingredient, Product
from shared.config.settings import Settings
from shared.infrastructure.db import Database
from shared.infrastructure.storage import LocalStorage


# SQLite in-memory database for testing (Database switches to StaticPool)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def test_settings(tmp_path):
    """Settings pointing at a throwaway upload directory."""
    return Settings(
        database_url=SQLALCHEMY_DATABASE_URL,
        storage_backend="local",
        storage_local_path=str(tmp_path / "uploads"),
        environment="test",
        debug=True,
    )


@pytest.fixture(scope="function")
def database(test_settings):
    """
    Fresh in-memory database for each test.
    Tables are created up front so fixtures can seed before the app starts.
    """
    database = Database(test_settings.database_url)
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture(scope="function")
def storage(test_settings):
    """Local storage under the test's tmp dir."""
    storage = LocalStorage(
        base_path=test_settings.storage_local_path,
        bucket=test_settings.storage_bucket,
        public_base_url=test_settings.storage_public_base_url,
    )
    storage.ensure_bucket()
    return storage


@pytest.fixture(scope="function")
def db_session(database):
    """Session on the test database."""
    with database.session() as session:
        yield session


@pytest.fixture(scope="function")
def app(test_settings, database, storage):
    return create_app(settings=test_settings, database=database, storage=storage)


@pytest.fixture(scope="function")
def client(app):
    """Test client; runs the lifespan (create_all, ensure_bucket)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed_product(db_session):
    """Create a test product."""
    product = Product(
        name="Château Test",
        brand="Test Winery",
        vintage="2019",
        wine_type="Red",
        sku="CT-2019",
        kcal="120",
    )
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product


@pytest.fixture
def seed_ingredient(db_session):
    """Create a test ingredient."""
    ingredient = Ingredient(
        name="Sulphur Dioxide",
        category="Preservative",
        e_number="E220",
        allergens=["Sulphites"],
    )
    db_session.add(ingredient)
    db_session.commit()
    db_session.refresh(ingredient)
    return ingredient


def _build_xlsx(headers, rows, title="Sheet1") -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = title
    sheet.append(list(headers))
    for row in rows:
        sheet.append(list(row))
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_xlsx():
    """Factory building an .xlsx workbook in memory."""
    return _build_xlsx
