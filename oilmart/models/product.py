# oilmart/models/product.py
import uuid
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class Product(SQLModel):
    """
    Row of the `products` table.

    Prices are per litre; stock is counted in litres.
    """

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    name: str = Field(description="Display name of the oil")
    description: str | None = Field(
        default=None,
        description="Optional long description",
    )
    image_url: str | None = Field(
        default=None,
        description="Public URL of the product image",
    )
    price_per_litre: float = Field(
        ge=0,
        description="Unit price per litre (INR)",
    )
    offer_price_per_litre: float | None = Field(
        default=None,
        ge=0,
        description="Discounted price per litre, if on offer",
    )
    stock_quantity: float = Field(
        default=0,
        ge=0,
        description="Litres currently in stock",
    )
    is_active: bool = Field(
        default=True,
        description="Whether this product is visible on the storefront",
    )
    is_featured: bool = Field(
        default=False,
        description="Whether this product is highlighted on the home page",
    )
    created_at: datetime


# Columns requested from PostgREST; exactly the fields declared above.
PRODUCT_COLUMNS = ", ".join(Product.model_fields)
