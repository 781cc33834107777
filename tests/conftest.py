"""Shared fixtures: temporary databases, fake stores and HTTP clients."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.api.dependencies import get_product_repository
from catalog_api.app.core.config import Settings
from catalog_api.app.core.db import init_db
from catalog_api.app.main import create_app
from catalog_api.app.repositories.product_repository import SQLiteProductRepository
from catalog_api.app.services.product_service import ProductService
from tests.fakes import FakeProductRepository


@pytest.fixture
def product_data():
    return {
        "name": "Test Product",
        "description": "A" * 115,
        "price": 99.99,
        "imageUrl": "http://example.com/image.jpg",
        "productCategory": "Electronics",
        "productType": "Gadget",
    }


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "catalog.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_repository(db_path):
    return SQLiteProductRepository(db_path)


@pytest.fixture
def fake_repository():
    return FakeProductRepository()


@pytest.fixture
def service(fake_repository):
    return ProductService(fake_repository)


@pytest.fixture
def app(tmp_path):
    return create_app(Settings(database_url=str(tmp_path / "api.db")))


@pytest.fixture
def client(app):
    """Client backed by a real SQLite file, migrated on startup."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fake_client(app, fake_repository):
    """Client whose product store is replaced by the in-memory fake."""
    app.dependency_overrides[get_product_repository] = lambda: fake_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
