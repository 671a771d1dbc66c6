# tests/conftest.py
import os

# Settings are read at import time; point them at a throwaway project.
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "anon-test-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "service-role-test-key")

import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from postgrest.exceptions import APIError

from oilmart.core.query_cache import QueryCache, get_query_cache
from oilmart.core.supabase_client import (
    get_admin_store,
    get_admin_store_factory,
    get_public_store,
)
from oilmart.main import app

ADMIN_ID = uuid.UUID("00000000-0000-0000-0000-0000000000aa")
CUSTOMER_ID = uuid.UUID("00000000-0000-0000-0000-0000000000cc")


def ts(days_ago: int = 0) -> str:
    moment = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc) - timedelta(days=days_ago)
    return moment.isoformat()


# ---------------------------------------------------------------------------
# In-memory stand-in for the Supabase client's fluent API
# ---------------------------------------------------------------------------


class FakeResponse:
    def __init__(self, data: list[dict[str, Any]]):
        self.data = data


def selected_columns(columns: str | None) -> list[str] | None:
    """
    Top-level names a PostgREST select returns.

    `items:order_items(id, quantity)` yields `items`; `*` selects everything.
    """
    if columns is None or columns.strip() == "*":
        return None
    names, depth, token = [], 0, ""
    for ch in columns + ",":
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == "," and depth == 0:
            head = token.split("(")[0].strip()
            names.append(head.split(":")[0].strip())
            token = ""
        else:
            token += ch
    return names


class FakeQuery:
    """Supports the builder calls the repositories make."""

    def __init__(self, store: "FakeStore", table: str):
        self.store = store
        self.table = table
        self.columns: str | None = None
        self.values: dict[str, Any] | None = None
        self.filters: list = []
        self.order_by: tuple[str, bool] | None = None
        self.max_rows: int | None = None

    def select(self, columns: str = "*"):
        self.columns = columns
        return self

    def insert(self, values: dict[str, Any]):
        self.values = values
        return self

    def eq(self, column: str, value: Any):
        self.filters.append((column, lambda v: v == value))
        self.store.filters.append((self.table, "eq", column, value))
        return self

    def in_(self, column: str, values: list[Any]):
        allowed = set(values)
        self.filters.append((column, lambda v: v in allowed))
        self.store.filters.append((self.table, "in", column, list(values)))
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = (column, desc)
        return self

    def limit(self, count: int):
        self.max_rows = count
        return self

    def execute(self) -> FakeResponse:
        op = "insert" if self.values is not None else "select"
        self.store.calls.append((self.table, op))

        if (self.table, op) in self.store.failures:
            raise APIError(
                {
                    "message": f"{op} on {self.table} failed",
                    "code": "XX000",
                    "hint": None,
                    "details": None,
                }
            )

        if op == "insert":
            row = {**self.store.defaults_for(self.table), **self.values}
            self.store.tables.setdefault(self.table, []).append(row)
            return FakeResponse([dict(row)])

        rows = [
            dict(r)
            for r in self.store.tables.get(self.table, [])
            if all(check(r.get(col)) for col, check in self.filters)
        ]
        if self.order_by:
            column, desc = self.order_by
            rows.sort(key=lambda r: r[column], reverse=desc)
        if self.max_rows is not None:
            rows = rows[: self.max_rows]
        names = selected_columns(self.columns)
        if names is not None:
            rows = [{k: r[k] for k in names if k in r} for r in rows]
        return FakeResponse(rows)


class FakeBucket:
    def __init__(self, store: "FakeStore", name: str):
        self.store = store
        self.name = name

    def upload(self, path: str, file: bytes, file_options: dict[str, str] | None = None):
        self.store.uploads.append((self.name, path, file, file_options or {}))
        return {"Key": f"{self.name}/{path}"}

    def get_public_url(self, path: str) -> str:
        return f"http://localhost:54321/storage/v1/object/public/{self.name}/{path}"


class FakeStorage:
    def __init__(self, store: "FakeStore"):
        self.store = store

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self.store, bucket)


class FakeStore:
    """
    Rows live in plain dicts keyed by table name.

    - `calls` records (table, op) for every executed request.
    - `filters` records (table, kind, column, value) for eq/in filters.
    - `fail(table, op)` makes that request raise APIError.
    """

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, str]] = []
        self.filters: list[tuple[str, str, str, Any]] = []
        self.failures: set[tuple[str, str]] = set()
        self.uploads: list[tuple[str, str, bytes, dict[str, str]]] = []
        self.storage = FakeStorage(self)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, table: str, *rows: dict[str, Any]) -> None:
        self.tables.setdefault(table, []).extend(rows)

    def fail(self, table: str, op: str = "select") -> None:
        self.failures.add((table, op))

    def count(self, table: str, op: str = "select") -> int:
        return self.calls.count((table, op))

    @staticmethod
    def defaults_for(table: str) -> dict[str, Any]:
        base = {"id": str(uuid.uuid4()), "created_at": datetime.now(timezone.utc).isoformat()}
        if table == "products":
            base["is_featured"] = False
        return base


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------


def product_row(**overrides: Any) -> dict[str, Any]:
    row = {
        "id": str(uuid.uuid4()),
        "name": "Cold Pressed Groundnut Oil",
        "description": "Wood pressed, unrefined",
        "image_url": None,
        "price_per_litre": 320.0,
        "offer_price_per_litre": None,
        "stock_quantity": 150,
        "is_active": True,
        "is_featured": False,
        "created_at": ts(),
    }
    row.update(overrides)
    return row


def coupon_row(**overrides: Any) -> dict[str, Any]:
    row = {
        "id": str(uuid.uuid4()),
        "code": "WELCOME10",
        "discount_type": "percentage",
        "discount_value": 10,
        "min_order_amount": None,
        "created_at": ts(),
    }
    row.update(overrides)
    return row


def profile_row(**overrides: Any) -> dict[str, Any]:
    row = {
        "id": str(uuid.uuid4()),
        "email": "asha@oilmart.in",
        "full_name": "Asha Rao",
        "phone": "+91 98450 12345",
        "created_at": ts(),
    }
    row.update(overrides)
    return row


def order_row(user_id: str, items: int = 1, **overrides: Any) -> dict[str, Any]:
    order_id = str(uuid.uuid4())
    row = {
        "id": order_id,
        "order_number": "OM-1001",
        "status": "pending",
        "final_amount": 1600.0,
        "user_id": user_id,
        "created_at": ts(),
        "items": [
            {
                "id": str(uuid.uuid4()),
                "order_id": order_id,
                "product_id": str(uuid.uuid4()),
                "quantity": 5,
                "unit_price": 320.0,
            }
            for _ in range(items)
        ],
    }
    row.update(overrides)
    return row


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def make_token(user_id: uuid.UUID, email: str = "someone@oilmart.in", ttl: int = 3600) -> str:
    claims = {"sub": str(user_id), "email": email, "exp": int(time.time()) + ttl}
    return jwt.encode(claims, os.environ["SUPABASE_JWT_SECRET"], algorithm="HS256")


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def cache() -> QueryCache:
    return QueryCache()


@pytest.fixture
def client(store: FakeStore, cache: QueryCache):
    app.dependency_overrides[get_public_store] = lambda: store
    app.dependency_overrides[get_admin_store] = lambda: store
    app.dependency_overrides[get_admin_store_factory] = lambda: (lambda: store)
    app.dependency_overrides[get_query_cache] = lambda: cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(store: FakeStore) -> dict[str, str]:
    store.seed("user_roles", {"user_id": str(ADMIN_ID), "role": "admin"})
    return {"Authorization": f"Bearer {make_token(ADMIN_ID, 'admin@oilmart.in')}"}


@pytest.fixture
def customer_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(CUSTOMER_ID, 'asha@oilmart.in')}"}
