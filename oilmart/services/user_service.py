# oilmart/services/user_service.py
import uuid
from collections import defaultdict

from supabase import Client

from oilmart.core.query_cache import CacheKey, QueryCache
from oilmart.models.profile import Profile
from oilmart.repositories.user_repo import UserRepository
from oilmart.schemas.user import AdminUsersPage, UserRow

# Label shown for profiles that have no user_roles row.
DEFAULT_ROLE_LABEL = "customer"
EMPTY_CELL = "-"


class UserService:
    """
    User table screen.

    Profiles and role assignments are two independent reads; roles are
    grouped by user_id once and looked up per profile.
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    @staticmethod
    def _to_row(profile: Profile, roles: list[str]) -> UserRow:
        return UserRow(
            id=profile.id,
            email=profile.email,
            full_name=profile.full_name or EMPTY_CELL,
            phone=profile.phone or EMPTY_CELL,
            roles=roles or [DEFAULT_ROLE_LABEL],
            created_on=profile.created_at.date(),
        )

    def load_rows(self, store: Client) -> list[UserRow]:
        profiles = self.repo.list_profiles(store)
        roles_by_user: dict[uuid.UUID, list[str]] = defaultdict(list)
        for assignment in self.repo.list_roles(store):
            roles_by_user[assignment.user_id].append(assignment.role)
        return [self._to_row(p, roles_by_user.get(p.id, [])) for p in profiles]

    def page(self, store: Client, cache: QueryCache) -> AdminUsersPage:
        result = cache.fetch(CacheKey.ADMIN_USERS, lambda: self.load_rows(store))
        if not result.ok:
            return AdminUsersPage(status="error", error=result.error)
        return AdminUsersPage(users=result.data)
