# oilmart/services/home_service.py
import random

from supabase import Client

from oilmart.core.config import get_settings
from oilmart.core.query_cache import CacheKey, QueryCache
from oilmart.models.review import Review
from oilmart.repositories.product_repo import ProductRepository
from oilmart.repositories.review_repo import ReviewRepository
from oilmart.schemas.home import (
    CallToAction,
    FeatureTile,
    Hero,
    HomePage,
    ProductSection,
    ReviewCard,
    ReviewSection,
)
from oilmart.services.product_service import product_card

ANONYMOUS_REVIEWER = "Anonymous"

HERO = Hero(
    title="Welcome to OilMart",
    tagline="Your trusted source for premium quality cooking oils. Pure, healthy, and authentic.",
    cta_label="Shop Now",
    cta_href="/products",
)

FEATURES = [
    FeatureTile(icon="shield", title="100% Pure", text="Authentic and unadulterated oils"),
    FeatureTile(icon="award", title="Premium Quality", text="Finest selection for your kitchen"),
    FeatureTile(icon="truck", title="Fast Delivery", text="Quick and safe doorstep delivery"),
    FeatureTile(icon="shopping-bag", title="Best Prices", text="Competitive pricing with offers"),
]

CALL_TO_ACTION = CallToAction(
    title="Ready to Experience Quality?",
    text=(
        "Browse our collection of premium cooking oils and start your "
        "journey to healthier cooking."
    ),
    label="Explore Products",
    href="/products",
)


class HomeService:
    """
    Marketing home page. Read-only.

    Sections:
      - featured products (active + featured, newest first)
      - a random subset of the active product pool, drawn per render
      - recent reviews with the reviewer's name
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
        rng: random.Random | None = None,
    ):
        self.product_repo = product_repo
        self.review_repo = review_repo
        self.rng = rng or random.Random()

    @staticmethod
    def _review_card(review: Review) -> ReviewCard:
        name = review.profile.full_name if review.profile else None
        return ReviewCard(
            rating=review.rating,
            comment=review.comment,
            reviewer=name or ANONYMOUS_REVIEWER,
            created_at=review.created_at,
        )

    def featured_section(self, store: Client, cache: QueryCache, limit: int) -> ProductSection:
        result = cache.fetch(
            CacheKey.HOME_FEATURED_PRODUCTS,
            lambda: self.product_repo.list_featured(store, limit),
        )
        if not result.ok:
            return ProductSection(status="error", error=result.error)
        return ProductSection(products=[product_card(p) for p in result.data])

    def random_section(self, store: Client, cache: QueryCache, limit: int) -> ProductSection:
        result = cache.fetch(
            CacheKey.HOME_PRODUCT_POOL,
            lambda: self.product_repo.list_active(store),
        )
        if not result.ok:
            return ProductSection(status="error", error=result.error)
        pool = result.data
        picked = self.rng.sample(pool, min(limit, len(pool)))
        return ProductSection(products=[product_card(p) for p in picked])

    def reviews_section(self, store: Client, cache: QueryCache, limit: int) -> ReviewSection:
        result = cache.fetch(
            CacheKey.HOME_RECENT_REVIEWS,
            lambda: self.review_repo.list_recent(store, limit),
        )
        if not result.ok:
            return ReviewSection(status="error", error=result.error)
        return ReviewSection(reviews=[self._review_card(r) for r in result.data])

    def page(self, store: Client, cache: QueryCache) -> HomePage:
        settings = get_settings()
        return HomePage(
            hero=HERO,
            features=FEATURES,
            featured_products=self.featured_section(store, cache, settings.HOME_FEATURED_LIMIT),
            random_products=self.random_section(store, cache, settings.HOME_RANDOM_LIMIT),
            recent_reviews=self.reviews_section(store, cache, settings.HOME_REVIEWS_LIMIT),
            call_to_action=CALL_TO_ACTION,
        )
