# oilmart/routers/home.py
from fastapi import APIRouter, Depends
from supabase import Client

from oilmart.core.query_cache import QueryCache, get_query_cache
from oilmart.core.supabase_client import get_public_store
from oilmart.repositories.product_repo import ProductRepository
from oilmart.repositories.review_repo import ReviewRepository
from oilmart.schemas.home import HomePage
from oilmart.services.home_service import HomeService

router = APIRouter(prefix="/home", tags=["Storefront"])

service = HomeService(ProductRepository(), ReviewRepository())


@router.get("", response_model=HomePage)
def home_page(
    store: Client = Depends(get_public_store),
    cache: QueryCache = Depends(get_query_cache),
):
    """
    Marketing home page.

    - Public endpoint.
    - Each product/review section carries its own status; a failed read
      leaves that section empty.
    """
    return service.page(store, cache)
