# oilmart/models/order.py
import uuid
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class OrderItem(SQLModel):
    """Row of the `order_items` table, embedded under its order."""

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    order_id: uuid.UUID
    product_id: uuid.UUID
    quantity: float = Field(gt=0)
    unit_price: float = Field(ge=0)


class Order(SQLModel):
    """
    Row of the `orders` table with its line items.

    Items come from the embedded `order_items` relation in the same query.
    """

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    order_number: str
    status: str
    final_amount: float
    user_id: uuid.UUID
    created_at: datetime
    items: list[OrderItem] = Field(default_factory=list)


ORDER_ITEM_COLUMNS = ", ".join(OrderItem.model_fields)

# Embedded join: `items` is an alias for the `order_items` relation.
ORDER_COLUMNS = ", ".join(
    [name for name in Order.model_fields if name != "items"]
    + [f"items:order_items({ORDER_ITEM_COLUMNS})"]
)
