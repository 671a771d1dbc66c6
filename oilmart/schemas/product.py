# oilmart/schemas/product.py
import uuid

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

from oilmart.schemas.common import PageState


class ProductForm(SQLModel):
    """
    Raw state of the "Add New Product" form.

    Only name, description, image_url, price_per_litre,
    offer_price_per_litre, stock_quantity and is_active are persisted.
    The other fields drive the form (e.g. quantity_litres feeds the
    calculated total price).
    """

    model_config = ConfigDict(extra="forbid")

    # Identification & description
    name: str = ""
    sku: str = ""
    category: str = ""
    short_description: str = ""
    description: str = ""
    tags: str = ""

    # Pricing & inventory (litres)
    base_price: str = ""
    price_per_litre: str = ""
    quantity_litres: str = "5"
    offer_price_per_litre: str = ""
    stock_quantity: str = ""
    low_stock_alert: str = "10"

    # Media & visibility
    image_url: str = ""
    is_active: bool = True


class ProductFormView(SQLModel):
    """The form plus its derived, never-persisted total price."""

    form: ProductForm
    total_price: str


class ProductCreate(SQLModel):
    """
    Insert payload for `products`.

    Prices and stock must be non-negative; optional fields are None
    when left empty in the form.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str | None = None
    image_url: str | None = None
    price_per_litre: float = Field(ge=0)
    offer_price_per_litre: float | None = Field(default=None, ge=0)
    stock_quantity: int = Field(ge=0)
    is_active: bool = True


class ProductCard(SQLModel):
    """One product as listed in the back office or on the home page."""

    id: uuid.UUID
    name: str
    description: str | None
    image_url: str | None
    price_per_litre: float
    offer_price_per_litre: float | None
    stock_quantity: float
    is_active: bool
    is_featured: bool
    price_label: str
    stock_label: str


class AdminProductsPage(PageState):
    products: list[ProductCard] = []


class ProductCreated(SQLModel):
    message: str
    product: ProductCard | None
    form: ProductFormView


class ProductImageUploaded(SQLModel):
    image_url: str
