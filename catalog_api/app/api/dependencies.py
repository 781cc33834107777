"""
API dependencies.

Builds the repository and service objects injected into route
handlers.  Tests replace ``get_product_repository`` through
``app.dependency_overrides`` to run the HTTP layer against an
in‑memory store.
"""

from fastapi import Depends, Request

from catalog_api.app.repositories.product_repository import (
    ProductRepository,
    SQLiteProductRepository,
)
from catalog_api.app.services.product_service import ProductService


def get_product_repository(request: Request) -> ProductRepository:
    """Return the SQLite product repository for the app's database."""
    return SQLiteProductRepository(request.app.state.database_path)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    """Return a product service bound to the request's repository."""
    return ProductService(repository)
