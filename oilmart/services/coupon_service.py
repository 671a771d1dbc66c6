# oilmart/services/coupon_service.py
import logging

import httpx
from fastapi import HTTPException, status
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import Client

from oilmart.core.forms import format_number, optional_float, parse_float
from oilmart.core.query_cache import CacheKey, Mutation, QueryCache
from oilmart.models.coupon import Coupon
from oilmart.repositories.coupon_repo import CouponRepository
from oilmart.schemas.coupon import (
    AdminCouponsPage,
    CouponCard,
    CouponCreate,
    CouponCreated,
    CouponForm,
)

logger = logging.getLogger(__name__)

CURRENCY = "₹"


class CouponService:
    """
    Coupon manager screen.

    Responsibilities:
      - list coupons through the read cache
      - coerce the "Add Coupon" form and insert one row
      - invalidate the coupon list after a create
    """

    def __init__(self, repo: CouponRepository):
        self.repo = repo

    # ----- Helpers -----

    @staticmethod
    def discount_label(coupon: Coupon) -> str:
        """Card label: "10% off" for percentage coupons, "₹50 off" for fixed ones."""
        value = format_number(coupon.discount_value)
        if coupon.discount_type == "percentage":
            return f"{value}% off"
        return f"{CURRENCY}{value} off"

    def _to_card(self, coupon: Coupon) -> CouponCard:
        return CouponCard(
            id=coupon.id,
            code=coupon.code,
            discount_type=coupon.discount_type,
            discount_value=coupon.discount_value,
            min_order_amount=coupon.min_order_amount,
            label=self.discount_label(coupon),
        )

    @staticmethod
    def coerce_form(form: CouponForm) -> CouponCreate:
        """
        Turn raw form strings into an insert payload.

        Raises:
            HTTPException(422): if discount_value is not a number.
        """
        try:
            return CouponCreate.model_validate(
                {
                    "code": form.code,
                    "discount_type": form.discount_type,
                    "discount_value": parse_float(form.discount_value),
                    "min_order_amount": optional_float(form.min_order_amount),
                }
            )
        except ValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail={
                    "message": "Invalid coupon form",
                    "errors": exc.errors(include_url=False, include_context=False),
                    "form": form.model_dump(),
                },
            )

    # ----- Page -----

    def default_form(self) -> CouponForm:
        return CouponForm()

    def page(self, store: Client, cache: QueryCache) -> AdminCouponsPage:
        result = cache.fetch(CacheKey.ADMIN_COUPONS, lambda: self.repo.list_all(store))
        if not result.ok:
            return AdminCouponsPage(status="error", error=result.error)
        return AdminCouponsPage(coupons=[self._to_card(c) for c in result.data])

    def create_coupon(
        self,
        store: Client,
        cache: QueryCache,
        form: CouponForm,
    ) -> CouponCreated:
        """
        Insert one coupon, then invalidate the list.

        A failed insert leaves the cache untouched and echoes the form back.

        Raises:
            HTTPException(422): form did not coerce.
            HTTPException(502): the store rejected the insert.
        """
        payload = self.coerce_form(form)

        try:
            created = self.repo.create(store, payload.model_dump())
        except (APIError, httpx.HTTPError):
            logger.exception("Coupon insert failed for code %s", payload.code)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail={"message": "Could not create coupon", "form": form.model_dump()},
            )

        cache.invalidate_for(Mutation.CREATE_COUPON)
        logger.info("Coupon %s created", payload.code)

        return CouponCreated(
            message="Coupon created",
            coupon=self._to_card(created) if created else None,
            form=self.default_form(),
        )
