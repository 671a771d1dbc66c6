# oilmart/schemas/common.py
from pydantic import ConfigDict
from sqlmodel import SQLModel

from oilmart.core.query_cache import QueryStatus


class PageState(SQLModel):
    """
    Outcome of the reads behind a page or page section.

    On "error" the collection fields are empty and `error` carries the
    store's message.
    """

    model_config = ConfigDict(extra="forbid")

    status: QueryStatus = "success"
    error: str | None = None
