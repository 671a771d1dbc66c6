# oilmart/repositories/review_repo.py
from supabase import Client

from oilmart.models.review import REVIEW_COLUMNS, Review


class ReviewRepository:
    """Read-only access to `reviews` joined with the author's profile."""

    def list_recent(self, store: Client, limit: int) -> list[Review]:
        res = (
            store.table("reviews")
            .select(REVIEW_COLUMNS)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [Review.model_validate(row) for row in res.data]
