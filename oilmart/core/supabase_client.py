# oilmart/core/supabase_client.py
from functools import lru_cache
from typing import Callable

from supabase import create_client, Client

from oilmart.core.config import get_settings


@lru_cache
def supabase_public() -> Client:
    """
    Create a Supabase client with the anon/public key.

    Use cases:
      - storefront reads (products, reviews)

    Note: This client still respects RLS.
    """
    settings = get_settings()
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


@lru_cache
def supabase_admin() -> Client:
    """
    Create a Supabase client with the service role key.

    Use cases:
      - back office reads over every row (profiles, orders, roles)
      - back office inserts (products, coupons)
      - uploading product images to Storage

    WARNING:
      - Never expose service role key to frontend.
      - Only backend should call this.

    Raises:
        RuntimeError: if SUPABASE_SERVICE_ROLE_KEY is not set.
    """
    settings = get_settings()
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise RuntimeError("Missing SUPABASE_SERVICE_ROLE_KEY in .env")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


def get_public_store() -> Client:
    """
    FastAPI dependency returning the storefront (anon) client.

    Usage:

        @router.get("/example")
        def example_endpoint(store: Client = Depends(get_public_store)):
            ...
    """
    return supabase_public()


def get_admin_store() -> Client:
    """FastAPI dependency returning the service-role client."""
    return supabase_admin()


def get_admin_store_factory() -> Callable[[], Client]:
    """
    FastAPI dependency returning a callable that builds the service-role
    client, for callers that may finish without touching the store.
    """
    return supabase_admin
