# oilmart/models/coupon.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

DiscountType = Literal["percentage", "fixed"]


class Coupon(SQLModel):
    """
    Row of the `coupons` table.

    - code is stored upper-case.
    - discount_value is a percent for "percentage", an amount for "fixed".
    """

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    code: str
    discount_type: DiscountType
    discount_value: float
    min_order_amount: float | None = Field(
        default=None,
        description="Minimum order total for the coupon to apply",
    )
    created_at: datetime


COUPON_COLUMNS = ", ".join(Coupon.model_fields)
