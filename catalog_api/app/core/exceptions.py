"""
Error types raised by the product service.

Every failure of a service operation is one of the three subclasses of
``ProductServiceError``.  The HTTP layer maps each of them to exactly
one status code, see ``ERROR_STATUS_CODES`` in the products endpoint.
"""

from typing import Any, Dict, Iterable, List, Optional


def error_details(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return field errors without the offending ``input`` values.

    Inputs are left out of error responses: they may hold floats such
    as ``NaN`` that cannot be encoded as JSON.
    """
    return [{k: v for k, v in error.items() if k != "input"} for error in errors]


class ProductServiceError(Exception):
    """Base class for all product service errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ProductServiceError):
    """The request payload violates a structural or business rule.

    ``errors`` holds per‑field details when the failure comes from
    schema parsing; it is ``None`` for single business rule failures.
    """

    def __init__(self, message: str, errors: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.errors = errors


class NotFoundError(ProductServiceError):
    """No product exists for the requested id."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class PersistenceError(ProductServiceError):
    """The database reported a failure other than a missing record."""
