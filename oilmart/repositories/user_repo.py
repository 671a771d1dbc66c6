# oilmart/repositories/user_repo.py
import uuid
from typing import Iterable

from supabase import Client

from oilmart.models.profile import (
    CUSTOMER_COLUMNS,
    PROFILE_COLUMNS,
    ROLE_COLUMNS,
    CustomerProfile,
    Profile,
    RoleAssignment,
)


class UserRepository:
    """
    Data access layer for `profiles` and `user_roles`.

    Responsibilities:
      - Pure PostgREST queries
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Profiles -----

    def list_profiles(self, store: Client) -> list[Profile]:
        """All profiles, newest first."""
        res = (
            store.table("profiles")
            .select(PROFILE_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [Profile.model_validate(row) for row in res.data]

    def list_customers(
        self,
        store: Client,
        user_ids: Iterable[uuid.UUID],
    ) -> list[CustomerProfile]:
        """
        Profiles for the given ids (id, email, full_name only).

        Returns [] without a request when `user_ids` is empty.
        """
        ids = sorted({str(uid) for uid in user_ids})
        if not ids:
            return []
        res = (
            store.table("profiles")
            .select(CUSTOMER_COLUMNS)
            .in_("id", ids)
            .execute()
        )
        return [CustomerProfile.model_validate(row) for row in res.data]

    # ----- Roles -----

    def list_roles(self, store: Client) -> list[RoleAssignment]:
        """Every role assignment."""
        res = store.table("user_roles").select(ROLE_COLUMNS).execute()
        return [RoleAssignment.model_validate(row) for row in res.data]

    def list_roles_for_user(
        self,
        store: Client,
        user_id: uuid.UUID,
    ) -> list[RoleAssignment]:
        """Role assignments of one user."""
        res = (
            store.table("user_roles")
            .select(ROLE_COLUMNS)
            .eq("user_id", str(user_id))
            .execute()
        )
        return [RoleAssignment.model_validate(row) for row in res.data]
