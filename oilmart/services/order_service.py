# oilmart/services/order_service.py
import logging

from supabase import Client

from oilmart.core.forms import format_number
from oilmart.core.query_cache import QUERY_ERRORS, CacheKey, QueryCache
from oilmart.models.order import Order
from oilmart.models.profile import CustomerProfile
from oilmart.repositories.order_repo import OrderRepository
from oilmart.repositories.user_repo import UserRepository
from oilmart.schemas.order import AdminOrdersPage, OrderRow

CURRENCY = "₹"
MISSING_CUSTOMER = "N/A"

logger = logging.getLogger(__name__)


class OrderService:
    """
    Order list screen.

    Orders and their line items come from one embedded query; customer
    profiles are fetched once for the distinct user ids and resolved
    through a dict keyed by profile id.
    """

    def __init__(self, order_repo: OrderRepository, user_repo: UserRepository):
        self.order_repo = order_repo
        self.user_repo = user_repo

    @staticmethod
    def _to_row(order: Order, customer: CustomerProfile | None) -> OrderRow:
        return OrderRow(
            id=order.id,
            order_number=order.order_number,
            status=order.status,
            customer=customer.email if customer else MISSING_CUSTOMER,
            customer_name=customer.full_name if customer else None,
            final_amount=order.final_amount,
            total_label=f"{CURRENCY}{format_number(order.final_amount)}",
            items_count=len(order.items),
            created_at=order.created_at,
        )

    def load_rows(self, store: Client) -> list[OrderRow]:
        orders = self.order_repo.list_with_items(store)
        try:
            customers = self.user_repo.list_customers(store, (o.user_id for o in orders))
        except QUERY_ERRORS as exc:
            # Orders still render; every customer cell falls back to N/A.
            logger.warning("Customer lookup for orders failed: %s", exc)
            customers = []
        by_id = {c.id: c for c in customers}
        return [self._to_row(o, by_id.get(o.user_id)) for o in orders]

    def page(self, store: Client, cache: QueryCache) -> AdminOrdersPage:
        result = cache.fetch(CacheKey.ADMIN_ORDERS, lambda: self.load_rows(store))
        if not result.ok:
            return AdminOrdersPage(status="error", error=result.error)
        return AdminOrdersPage(orders=result.data)
