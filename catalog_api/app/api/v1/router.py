"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under their prefixes.  When a new
resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import health, products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(health.router, prefix="/health", tags=["health"])
