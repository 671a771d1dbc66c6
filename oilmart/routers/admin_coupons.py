# oilmart/routers/admin_coupons.py
from fastapi import APIRouter, Depends, status
from supabase import Client

from oilmart.core.auth import require_admin
from oilmart.core.query_cache import QueryCache, get_query_cache
from oilmart.core.supabase_client import get_admin_store
from oilmart.repositories.coupon_repo import CouponRepository
from oilmart.schemas.coupon import AdminCouponsPage, CouponCreated, CouponForm
from oilmart.services.coupon_service import CouponService

router = APIRouter(
    prefix="/admin/coupons",
    tags=["Admin Coupons"],
    dependencies=[Depends(require_admin)],
)

repo = CouponRepository()
service = CouponService(repo)


@router.get("", response_model=AdminCouponsPage)
def list_coupons(
    store: Client = Depends(get_admin_store),
    cache: QueryCache = Depends(get_query_cache),
):
    """
    Coupon list, newest first (admin only).
    """
    return service.page(store, cache)


@router.get("/form", response_model=CouponForm)
def coupon_form():
    """Empty "Add Coupon" form with its defaults."""
    return service.default_form()


@router.post(
    "",
    response_model=CouponCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_coupon(
    form: CouponForm,
    store: Client = Depends(get_admin_store),
    cache: QueryCache = Depends(get_query_cache),
):
    """
    Create a coupon from the raw form (admin only).

    - code is stored upper-case
    - returns the new coupon and the form reset to defaults
    """
    return service.create_coupon(store, cache, form)
