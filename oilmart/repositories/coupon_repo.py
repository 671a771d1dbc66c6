# oilmart/repositories/coupon_repo.py
from typing import Any

from supabase import Client

from oilmart.models.coupon import COUPON_COLUMNS, Coupon

TABLE = "coupons"


class CouponRepository:
    """Data access layer for the `coupons` table."""

    def list_all(self, store: Client) -> list[Coupon]:
        res = (
            store.table(TABLE)
            .select(COUPON_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [Coupon.model_validate(row) for row in res.data]

    def create(self, store: Client, values: dict[str, Any]) -> Coupon | None:
        res = store.table(TABLE).insert(values).execute()
        if not res.data:
            return None
        return Coupon.model_validate(res.data[0])
