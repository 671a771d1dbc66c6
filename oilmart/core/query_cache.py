# oilmart/core/query_cache.py
"""
Read cache shared by every page controller.

Each page reads its collections through `QueryCache.fetch(key, fetcher)`.
A cached value is served until a mutation invalidates its key; the set of
keys each mutation invalidates is declared once in `INVALIDATES`.

Failures never raise out of `fetch`: the caller receives a `QueryResult`
in the "error" state and the page renders an empty section.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Generic, Literal, TypeVar

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryStatus = Literal["success", "error"]

# Errors that put a query into the error state instead of propagating.
QUERY_ERRORS: tuple[type[Exception], ...] = (APIError, httpx.HTTPError, ValidationError)


class CacheKey(str, Enum):
    """Identifiers grouping one kind of query result for invalidation."""

    ADMIN_COUPONS = "admin-coupons"
    ADMIN_ORDERS = "admin-orders"
    ADMIN_PRODUCTS = "admin-products"
    ADMIN_USERS = "admin-users"
    HOME_FEATURED_PRODUCTS = "home-featured-products"
    HOME_PRODUCT_POOL = "home-product-pool"
    HOME_RECENT_REVIEWS = "home-recent-reviews"


class Mutation(str, Enum):
    """Write operations that make cached reads stale."""

    CREATE_COUPON = "create-coupon"
    CREATE_PRODUCT = "create-product"


INVALIDATES: dict[Mutation, frozenset[CacheKey]] = {
    Mutation.CREATE_COUPON: frozenset({CacheKey.ADMIN_COUPONS}),
    Mutation.CREATE_PRODUCT: frozenset(
        {
            CacheKey.ADMIN_PRODUCTS,
            CacheKey.HOME_FEATURED_PRODUCTS,
            CacheKey.HOME_PRODUCT_POOL,
        }
    ),
}

_missing = set(Mutation) - set(INVALIDATES)
if _missing:
    raise RuntimeError(f"Mutations without invalidation entry: {sorted(_missing)}")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Outcome of a cached read: data on success, a message on error."""

    status: QueryStatus
    data: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


class QueryCache:
    """
    Keyed read cache with in-flight de-duplication.

    - A key holds the last successful value until invalidated.
    - Concurrent fetches of the same key share one call to the store.
    - A fetch that straddles an invalidation returns its data to the caller
      but does not repopulate the cache.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[CacheKey, Any] = {}
        self._generations: dict[CacheKey, int] = {}
        self._key_locks: dict[CacheKey, threading.Lock] = {}

    def fetch(self, key: CacheKey, fetcher: Callable[[], T]) -> QueryResult[T]:
        with self._lock:
            if key in self._entries:
                return QueryResult(status="success", data=self._entries[key])
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # Another caller may have filled the entry while we waited.
            with self._lock:
                if key in self._entries:
                    return QueryResult(status="success", data=self._entries[key])
                generation = self._generations.get(key, 0)

            try:
                value = fetcher()
            except QUERY_ERRORS as exc:
                logger.warning("Query %s failed: %s", key.value, exc)
                return QueryResult(status="error", error=str(exc))

            with self._lock:
                if self._generations.get(key, 0) == generation:
                    self._entries[key] = value

        return QueryResult(status="success", data=value)

    def peek(self, key: CacheKey) -> Any | None:
        """Return the cached value for `key` without fetching."""
        with self._lock:
            return self._entries.get(key)

    def invalidate(self, *keys: CacheKey) -> None:
        with self._lock:
            for key in keys:
                self._entries.pop(key, None)
                self._generations[key] = self._generations.get(key, 0) + 1
        logger.debug("Invalidated %s", ", ".join(k.value for k in keys))

    def invalidate_for(self, mutation: Mutation) -> frozenset[CacheKey]:
        """Drop every key `mutation` makes stale and return them."""
        keys = INVALIDATES[mutation]
        self.invalidate(*keys)
        return keys


@lru_cache
def get_query_cache() -> QueryCache:
    """Process-wide cache registry (FastAPI dependency)."""
    return QueryCache()
