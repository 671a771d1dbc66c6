# oilmart/models/profile.py
import uuid
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Profile(SQLModel):
    """
    Row of the `profiles` table.

    Identity:
      - id: matches Supabase auth.users.id

    Roles are not stored here; see `RoleAssignment`.
    """

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    email: str
    full_name: str | None = None
    phone: str | None = None
    created_at: datetime


class CustomerProfile(SQLModel):
    """The part of a profile shown next to an order."""

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    email: str
    full_name: str | None = None


class RoleAssignment(SQLModel):
    """
    Row of the `user_roles` table.

    A user may have zero, one or several rows.
    """

    model_config = ConfigDict(extra="forbid")

    user_id: uuid.UUID
    role: str


PROFILE_COLUMNS = ", ".join(Profile.model_fields)
CUSTOMER_COLUMNS = ", ".join(CustomerProfile.model_fields)
ROLE_COLUMNS = ", ".join(RoleAssignment.model_fields)
