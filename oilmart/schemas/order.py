# oilmart/schemas/order.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel

from oilmart.schemas.common import PageState


class OrderRow(SQLModel):
    """
    One order in the back office list.

    `customer` is the customer's email, or "N/A" when the order's
    user_id has no profile.
    """

    id: uuid.UUID
    order_number: str
    status: str
    customer: str
    customer_name: str | None = None
    final_amount: float
    total_label: str
    items_count: int
    created_at: datetime


class AdminOrdersPage(PageState):
    orders: list[OrderRow] = []
