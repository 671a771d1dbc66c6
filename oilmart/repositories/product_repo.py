# oilmart/repositories/product_repo.py
from typing import Any

from supabase import Client

from oilmart.models.product import PRODUCT_COLUMNS, Product

TABLE = "products"


class ProductRepository:
    """
    Data access layer for the `products` table.

    - Pure PostgREST calls (select + insert).
    - No FastAPI, no business logic.
    - Store errors (postgrest APIError) propagate to the caller.
    """

    def list_all(self, store: Client) -> list[Product]:
        """All products, newest first (back office)."""
        res = (
            store.table(TABLE)
            .select(PRODUCT_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [Product.model_validate(row) for row in res.data]

    def list_active(self, store: Client) -> list[Product]:
        """Products visible on the storefront, newest first."""
        res = (
            store.table(TABLE)
            .select(PRODUCT_COLUMNS)
            .eq("is_active", True)
            .order("created_at", desc=True)
            .execute()
        )
        return [Product.model_validate(row) for row in res.data]

    def list_featured(self, store: Client, limit: int) -> list[Product]:
        """Active featured products, newest first, at most `limit`."""
        res = (
            store.table(TABLE)
            .select(PRODUCT_COLUMNS)
            .eq("is_active", True)
            .eq("is_featured", True)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [Product.model_validate(row) for row in res.data]

    def create(self, store: Client, values: dict[str, Any]) -> Product | None:
        """
        Insert one product row.

        Returns the stored row, or None if the store returned no
        representation (e.g. RLS hides it from this client).
        """
        res = store.table(TABLE).insert(values).execute()
        if not res.data:
            return None
        return Product.model_validate(res.data[0])
