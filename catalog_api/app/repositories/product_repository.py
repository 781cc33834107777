"""
Product persistence.

``ProductRepository`` is the interface the product service depends on:
create, find by id and delete by id.  ``SQLiteProductRepository`` is
the implementation used by the running application.  Tests substitute
an in‑memory implementation of the same interface.

All queries use parameterized statements.  Every ``sqlite3`` failure
is re‑raised as ``PersistenceError`` so callers deal with a single
error type regardless of the database engine.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from catalog_api.app.core.db import get_connection
from catalog_api.app.core.exceptions import PersistenceError
from catalog_api.app.schemas.product import ProductRead


logger = logging.getLogger(__name__)


class ProductRepository(ABC):
    """Data access interface for products."""

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> ProductRead:
        """Insert a product and return it with its id and timestamps.

        ``fields`` contains ``name``, ``description_long``,
        ``description_short``, ``price``, ``product_category`` and
        ``product_type``.
        """

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[ProductRead]:
        """Return the product with this id, or None if there is none."""

    @abstractmethod
    def delete_by_id(self, product_id: str) -> Optional[ProductRead]:
        """Delete the product and return its last state, or None if it did not exist."""


class SQLiteProductRepository(ProductRepository):
    """Products stored in the ``products`` table of a SQLite database.

    A new connection is opened for every call, so one instance can be
    shared between concurrent requests.
    """

    _COLUMNS = (
        "name",
        "description_long",
        "description_short",
        "price",
        "product_category",
        "product_type",
    )

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def create(self, fields: Dict[str, Any]) -> ProductRead:
        product_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc).isoformat()
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO products (
                    id, name, description_long, description_short, price,
                    product_category, product_type, created_at, updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (product_id, *(fields[column] for column in self._COLUMNS), now, now),
            )
            conn.commit()
            row = cursor.execute(
                "SELECT * FROM products WHERE id = ?",
                (product_id,),
            ).fetchone()
            logger.info("Created product %s", product_id)
            return self._row_to_product_read(row)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Could not create product: {exc}") from exc
        finally:
            conn.close()

    def find_by_id(self, product_id: str) -> Optional[ProductRead]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT * FROM products WHERE id = ?",
                (product_id,),
            ).fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Could not read product {product_id}: {exc}") from exc
        finally:
            conn.close()
        if not row:
            return None
        return self._row_to_product_read(row)

    def delete_by_id(self, product_id: str) -> Optional[ProductRead]:
        conn = self._connect()
        try:
            # Read and delete in one write transaction: only one of two
            # concurrent deletes of the same id sees the row.
            conn.execute("BEGIN IMMEDIATE")
            row = conn.execute(
                "SELECT * FROM products WHERE id = ?",
                (product_id,),
            ).fetchone()
            if not row:
                conn.rollback()
                return None
            conn.execute("DELETE FROM products WHERE id = ?", (product_id,))
            conn.commit()
            logger.info("Deleted product %s", product_id)
            return self._row_to_product_read(row)
        except sqlite3.Error as exc:
            conn.rollback()
            raise PersistenceError(f"Could not delete product {product_id}: {exc}") from exc
        finally:
            conn.close()

    def _connect(self) -> sqlite3.Connection:
        try:
            return get_connection(self.db_path)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Could not open database {self.db_path}: {exc}") from exc

    @staticmethod
    def _row_to_product_read(row: sqlite3.Row) -> ProductRead:
        """Convert a database row to a ProductRead schema instance."""
        return ProductRead(
            id=row["id"],
            name=row["name"],
            description_long=row["description_long"],
            description_short=row["description_short"],
            price=row["price"],
            product_category=row["product_category"],
            product_type=row["product_type"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
