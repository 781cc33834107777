"""
Pydantic models for product data.

``ProductCreate`` describes the body of a creation request and
``ProductRead`` the product returned by every endpoint.  Attributes are
snake_case in Python and camelCase on the wire (``productCategory``,
``descriptionShort`` ...).  Both names are accepted on input.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a product.

    Types are checked strictly: a price sent as a string or boolean is
    rejected instead of being coerced.  Business rules (non‑empty name,
    positive price) are enforced by ``ProductService``.
    """

    name: str = Field(..., examples=["Test Product"])
    description: str = Field(..., examples=["A gadget that does everything"])
    price: float = Field(..., examples=[99.99])
    image_url: Optional[str] = Field(
        None,
        alias="imageUrl",
        examples=["http://example.com/image.jpg"],
        description="Accepted for clients that send it; not stored",
    )
    product_category: str = Field(..., alias="productCategory", examples=["Electronics"])
    product_type: str = Field(..., alias="productType", examples=["Gadget"])

    model_config = {
        "strict": True,
        "populate_by_name": True,
    }


class ProductRead(BaseModel):
    """Schema for a stored product."""

    id: str
    name: str
    description_long: str = Field(..., alias="descriptionLong")
    description_short: str = Field(..., alias="descriptionShort")
    price: float
    product_category: str = Field(..., alias="productCategory")
    product_type: str = Field(..., alias="productType")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
