# oilmart/routers/admin_users.py
from fastapi import APIRouter, Depends
from supabase import Client

from oilmart.core.auth import require_admin
from oilmart.core.query_cache import QueryCache, get_query_cache
from oilmart.core.supabase_client import get_admin_store
from oilmart.repositories.user_repo import UserRepository
from oilmart.schemas.user import AdminUsersPage
from oilmart.services.user_service import UserService

router = APIRouter(
    prefix="/admin/users",
    tags=["Admin Users"],
    dependencies=[Depends(require_admin)],
)

repo = UserRepository()
service = UserService(repo)


@router.get("", response_model=AdminUsersPage)
def list_users(
    store: Client = Depends(get_admin_store),
    cache: QueryCache = Depends(get_query_cache),
):
    """
    All profiles with their role labels (admin only).

    Profiles without a role row are shown as "customer".
    """
    return service.page(store, cache)
