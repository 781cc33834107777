"""
Product endpoints for API v1.

These routes expose create, fetch and delete operations for products.
Service errors are translated to HTTP errors here: every
``ProductServiceError`` subclass has exactly one status code in
``ERROR_STATUS_CODES``.
"""

import logging
from typing import Dict, NoReturn, Type

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder

from catalog_api.app.api.dependencies import get_product_service
from catalog_api.app.core.exceptions import (
    NotFoundError,
    PersistenceError,
    ProductServiceError,
    ValidationError,
    error_details,
)
from catalog_api.app.schemas.product import ProductCreate, ProductRead
from catalog_api.app.services.product_service import ProductService

router = APIRouter()

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: Dict[Type[ProductServiceError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def raise_http_error(exc: ProductServiceError) -> NoReturn:
    """Re‑raise a service error as the matching ``HTTPException``."""
    status_code = ERROR_STATUS_CODES[type(exc)]
    if isinstance(exc, PersistenceError):
        logger.exception("Product storage failure: %s", exc.message)
        detail = "Internal server error"
    elif isinstance(exc, ValidationError) and exc.errors:
        detail = jsonable_encoder(error_details(exc.errors))
    else:
        detail = exc.message
    raise HTTPException(status_code=status_code, detail=detail) from exc


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product.

    The short description is derived from ``description``.  Returns
    HTTP 400 if the name is empty or the price is not positive.
    """
    try:
        return await service.create_product(product_in)
    except ProductServiceError as exc:
        raise_http_error(exc)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Retrieve a single product by ID.  Returns HTTP 404 if it does not exist."""
    try:
        return await service.get_product(product_id)
    except ProductServiceError as exc:
        raise_http_error(exc)


@router.delete("/{product_id}", response_model=ProductRead)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Delete a product and return it as it was before deletion.

    Returns HTTP 404 if the product does not exist, including when it
    has already been deleted.
    """
    try:
        return await service.delete_product(product_id)
    except ProductServiceError as exc:
        raise_http_error(exc)
