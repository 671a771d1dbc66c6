# oilmart/schemas/coupon.py
import uuid

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from oilmart.models.coupon import DiscountType
from oilmart.schemas.common import PageState


class CouponForm(SQLModel):
    """
    Raw state of the "Add Coupon" dialog.

    Numeric inputs are kept as the strings the user typed; the defaults
    below are what the dialog resets to after a successful create.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = ""
    discount_type: DiscountType = "percentage"
    discount_value: str = ""
    min_order_amount: str = ""


class CouponCreate(SQLModel):
    """
    Insert payload for `coupons`, built from a coerced `CouponForm`.

    - code is normalized to upper case
    - min_order_amount is None when left empty
    """

    model_config = ConfigDict(extra="forbid")

    code: str
    discount_type: DiscountType
    discount_value: float
    min_order_amount: float | None = None

    @field_validator("code")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()


class CouponCard(SQLModel):
    """One coupon as listed in the back office."""

    id: uuid.UUID
    code: str
    discount_type: DiscountType
    discount_value: float
    min_order_amount: float | None
    label: str


class AdminCouponsPage(PageState):
    coupons: list[CouponCard] = []


class CouponCreated(SQLModel):
    """Result of a successful create: the new row and a reset form."""

    message: str
    coupon: CouponCard | None
    form: CouponForm
