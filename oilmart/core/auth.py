# oilmart/core/auth.py
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from supabase import Client

from oilmart.core.config import get_settings
from oilmart.core.query_cache import QUERY_ERRORS
from oilmart.core.supabase_client import get_admin_store_factory
from oilmart.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so guests get a session context too.
bearer_scheme = HTTPBearer(auto_error=False)

user_repo = UserRepository()

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class SessionContext:
    """
    Who is making the request, resolved once per request.

    - Guests have no user_id and no roles.
    - Roles come from the `user_roles` table; a user may hold several.
    """

    user_id: uuid.UUID | None = None
    email: str | None = None
    roles: tuple[str, ...] = ()

    @property
    def is_guest(self) -> bool:
        return self.user_id is None

    @property
    def is_admin(self) -> bool:
        return ADMIN_ROLE in self.roles


class AdminRequired(Exception):
    """
    Raised by the admin gate. The app turns it into a redirect to
    `location` with an empty body.
    """

    def __init__(self, location: str = "/"):
        super().__init__(location)
        self.location = location


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a Supabase access token (JWT).

    Verification:
      - signature (HS256 using SUPABASE_JWT_SECRET)
      - expiration time (exp)
      - audience is NOT verified (Supabase 'aud' may vary)

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[settings.SUPABASE_JWT_ALG],
            options={"verify_aud": False},
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_session_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store_factory: Callable[[], Client] = Depends(get_admin_store_factory),
) -> SessionContext:
    """
    Resolve the session for the current request.

    Flow:
      1. If no Authorization header => guest (no store is created).
      2. Decode JWT => extract 'sub' (auth user id) and 'email'.
      3. Load role assignments for 'sub' from user_roles.

    Raises:
        HTTPException(401): if token is malformed or missing 'sub'.
        HTTPException(502): if the role lookup fails.
    """
    if credentials is None:
        return SessionContext()

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")
    if not sub:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing sub",
        )

    # Supabase provides sub as a string; enforce UUID
    try:
        user_id = uuid.UUID(sub)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid sub in token",
        )

    try:
        roles = user_repo.list_roles_for_user(store_factory(), user_id)
    except QUERY_ERRORS as exc:
        logger.error("Role lookup failed for %s: %s", user_id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not resolve user roles",
        )

    return SessionContext(
        user_id=user_id,
        email=payload.get("email"),
        roles=tuple(r.role for r in roles),
    )


def require_admin(
    session: SessionContext = Depends(get_session_context),
) -> SessionContext:
    """
    Admin gate for back office routers.

    Non-admin sessions (guests included) are redirected to the site root.

    Raises:
        AdminRequired: if the session holds no 'admin' role.
    """
    if not session.is_admin:
        raise AdminRequired("/")
    return session
