# oilmart/routers/admin_orders.py
from fastapi import APIRouter, Depends
from supabase import Client

from oilmart.core.auth import require_admin
from oilmart.core.query_cache import QueryCache, get_query_cache
from oilmart.core.supabase_client import get_admin_store
from oilmart.repositories.order_repo import OrderRepository
from oilmart.repositories.user_repo import UserRepository
from oilmart.schemas.order import AdminOrdersPage
from oilmart.services.order_service import OrderService

router = APIRouter(
    prefix="/admin/orders",
    tags=["Admin Orders"],
    dependencies=[Depends(require_admin)],
)

service = OrderService(OrderRepository(), UserRepository())


@router.get("", response_model=AdminOrdersPage)
def list_orders(
    store: Client = Depends(get_admin_store),
    cache: QueryCache = Depends(get_query_cache),
):
    """
    All orders with item counts and customer email (admin only).
    """
    return service.page(store, cache)
