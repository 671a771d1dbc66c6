# oilmart/schemas/home.py
from datetime import datetime

from sqlmodel import SQLModel

from oilmart.schemas.common import PageState
from oilmart.schemas.product import ProductCard


class Hero(SQLModel):
    title: str
    tagline: str
    cta_label: str
    cta_href: str


class FeatureTile(SQLModel):
    icon: str
    title: str
    text: str


class CallToAction(SQLModel):
    title: str
    text: str
    label: str
    href: str


class ProductSection(PageState):
    products: list[ProductCard] = []


class ReviewCard(SQLModel):
    rating: int
    comment: str | None
    reviewer: str
    created_at: datetime


class ReviewSection(PageState):
    reviews: list[ReviewCard] = []


class HomePage(SQLModel):
    """Marketing content plus three independently loaded sections."""

    hero: Hero
    features: list[FeatureTile]
    featured_products: ProductSection
    random_products: ProductSection
    recent_reviews: ReviewSection
    call_to_action: CallToAction
