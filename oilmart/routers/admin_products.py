# oilmart/routers/admin_products.py
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from supabase import Client

from oilmart.core.auth import require_admin
from oilmart.core.query_cache import QueryCache, get_query_cache
from oilmart.core.supabase_client import get_admin_store
from oilmart.repositories.product_repo import ProductRepository
from oilmart.schemas.product import (
    AdminProductsPage,
    ProductCreated,
    ProductForm,
    ProductFormView,
    ProductImageUploaded,
)
from oilmart.services.product_service import ProductService

router = APIRouter(
    prefix="/admin/products",
    tags=["Admin Products"],
    dependencies=[Depends(require_admin)],
)

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=AdminProductsPage)
def list_products(
    store: Client = Depends(get_admin_store),
    cache: QueryCache = Depends(get_query_cache),
):
    """
    All products, active or not, newest first (admin only).
    """
    return service.page(store, cache)


@router.get("/form", response_model=ProductFormView)
def product_form():
    """Empty "Add New Product" form with its calculated total."""
    return service.form_view()


@router.post("/form/preview", response_model=ProductFormView)
def preview_product_form(form: ProductForm):
    """
    Recompute the derived total price for the current form state.

    Nothing is stored.
    """
    return service.form_view(form)


@router.post(
    "/form/image",
    response_model=ProductImageUploaded,
    summary="Upload a product image for the form",
)
def upload_product_image(
    file: UploadFile = File(...),
    store: Client = Depends(get_admin_store),
):
    """
    Upload an image and return the public URL for the form's image_url.

    - Accepts JPEG, PNG, WEBP up to 5MB.
    """
    if not file.content_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing content-type for uploaded file",
        )

    file_bytes = file.file.read()
    url = service.upload_form_image(store, file.content_type, file_bytes)
    return ProductImageUploaded(image_url=url)


@router.post(
    "",
    response_model=ProductCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    form: ProductForm,
    store: Client = Depends(get_admin_store),
    cache: QueryCache = Depends(get_query_cache),
):
    """
    Create a product from the raw form (admin only).

    Returns the new product and the form reset to defaults.
    """
    return service.create_product(store, cache, form)
