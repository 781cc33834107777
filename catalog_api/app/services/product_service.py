"""
Business logic for products.

``ProductService`` validates creation requests, derives the short
description and delegates storage to an injected ``ProductRepository``.
Every failure is raised as one of the ``ProductServiceError``
subclasses; the HTTP layer decides which status code each one gets.
The service keeps no state of its own.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Union

import pydantic

from catalog_api.app.core.exceptions import NotFoundError, ValidationError
from catalog_api.app.repositories.product_repository import ProductRepository
from catalog_api.app.schemas.product import ProductCreate, ProductRead


SHORT_DESCRIPTION_MAX_LENGTH = 100
TRUNCATION_MARKER = "..."


def truncate_description(
    description: str,
    max_length: int = SHORT_DESCRIPTION_MAX_LENGTH,
    marker: str = TRUNCATION_MARKER,
) -> str:
    """Shorten ``description`` to at most ``max_length`` characters.

    Text that already fits is returned unchanged.  Longer text keeps its
    first ``max_length - len(marker)`` characters followed by ``marker``,
    so the result is exactly ``max_length`` characters long.
    """
    if len(description) <= max_length:
        return description
    return description[: max_length - len(marker)] + marker


class ProductService:
    """Service for creating, fetching and deleting products."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    async def create_product(self, data: Union[ProductCreate, Mapping[str, Any]]) -> ProductRead:
        """Validate ``data``, store a new product and return it.

        ``data`` may be a raw mapping (e.g. a decoded JSON body); it is
        parsed into ``ProductCreate`` first.  Nothing is written when
        parsing or a business rule fails.

        Raises
        ------
        ValidationError
            A field is missing or has the wrong type, the name is empty,
            or the price is not a finite number greater than zero.
        PersistenceError
            The repository could not store the product.
        """
        if not isinstance(data, ProductCreate):
            try:
                data = ProductCreate.model_validate(data)
            except pydantic.ValidationError as exc:
                raise ValidationError(
                    "Invalid product payload",
                    errors=exc.errors(include_url=False),
                ) from exc
        self._check_business_rules(data)
        return self.repository.create(
            {
                "name": data.name,
                "description_long": data.description,
                "description_short": truncate_description(data.description),
                "price": data.price,
                "product_category": data.product_category,
                "product_type": data.product_type,
            }
        )

    async def get_product(self, product_id: str) -> ProductRead:
        """Return the product with ``product_id`` or raise ``NotFoundError``."""
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError(product_id)
        return product

    async def delete_product(self, product_id: str) -> ProductRead:
        """Delete the product and return the state it had before deletion.

        Deleting an id that does not exist (including one that was
        already deleted) raises ``NotFoundError``.
        """
        product = self.repository.delete_by_id(product_id)
        if product is None:
            raise NotFoundError(product_id)
        return product

    @staticmethod
    def _check_business_rules(data: ProductCreate) -> None:
        if not data.name:
            raise ValidationError("Product name must not be empty")
        if not math.isfinite(data.price) or data.price <= 0:
            raise ValidationError("Product price must be greater than zero")
