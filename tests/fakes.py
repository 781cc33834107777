"""In-memory fake repositories for testing.

These implement ``ProductRepository`` but keep everything in a dict.
No file I/O, no side effects.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from catalog_api.app.core.exceptions import PersistenceError
from catalog_api.app.repositories.product_repository import ProductRepository
from catalog_api.app.schemas.product import ProductRead


class FakeProductRepository(ProductRepository):

    def __init__(self, products: List[ProductRead] | None = None) -> None:
        self._store: Dict[str, ProductRead] = {}
        self._ids = itertools.count(1)
        self.created: List[Dict[str, Any]] = []
        for p in products or []:
            self._store[p.id] = p

    def create(self, fields: Dict[str, Any]) -> ProductRead:
        self.created.append(dict(fields))
        now = datetime.now(timezone.utc)
        product = ProductRead(id=str(next(self._ids)), created_at=now, updated_at=now, **fields)
        self._store[product.id] = product
        return product

    def find_by_id(self, product_id: str) -> Optional[ProductRead]:
        return self._store.get(product_id)

    def delete_by_id(self, product_id: str) -> Optional[ProductRead]:
        return self._store.pop(product_id, None)


class BrokenProductRepository(ProductRepository):
    """Every call fails the way an unreachable database would."""

    def create(self, fields: Dict[str, Any]) -> ProductRead:
        raise PersistenceError("database is locked")

    def find_by_id(self, product_id: str) -> Optional[ProductRead]:
        raise PersistenceError("database is locked")

    def delete_by_id(self, product_id: str) -> Optional[ProductRead]:
        raise PersistenceError("database is locked")
