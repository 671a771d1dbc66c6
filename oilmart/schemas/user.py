# oilmart/schemas/user.py
import uuid
from datetime import date

from sqlmodel import SQLModel

from oilmart.schemas.common import PageState


class UserRow(SQLModel):
    """
    One row of the user table.

    Missing name/phone render as "-"; a profile without role rows shows
    the single label "customer".
    """

    id: uuid.UUID
    email: str
    full_name: str
    phone: str
    roles: list[str]
    created_on: date


class AdminUsersPage(PageState):
    users: list[UserRow] = []
