# oilmart/repositories/order_repo.py
from supabase import Client

from oilmart.models.order import ORDER_COLUMNS, Order

TABLE = "orders"


class OrderRepository:
    """
    Data access layer for orders and their order_items.

    Line items are fetched in the same request through PostgREST's
    embedded resource syntax.
    """

    def list_with_items(self, store: Client) -> list[Order]:
        res = (
            store.table(TABLE)
            .select(ORDER_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [Order.model_validate(row) for row in res.data]
