# oilmart/services/product_service.py
import logging

import httpx
from fastapi import HTTPException, status
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import Client

from oilmart.core.forms import (
    format_number,
    optional_float,
    optional_text,
    parse_float,
    parse_int,
)
from oilmart.core.query_cache import CacheKey, Mutation, QueryCache
from oilmart.core.storage_utils import generate_filename, upload_to_storage
from oilmart.models.product import Product
from oilmart.repositories.product_repo import ProductRepository
from oilmart.schemas.product import (
    AdminProductsPage,
    ProductCard,
    ProductCreate,
    ProductCreated,
    ProductForm,
    ProductFormView,
)

logger = logging.getLogger(__name__)

CURRENCY = "₹"

# --- Image config ---

MAX_IMAGE_BYTES = 5 * 1024 * 1024  # 5MB per image

ALLOWED_IMAGE_CONTENT_TYPES: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}


def calculate_total_price(price_per_litre: str, quantity_litres: str) -> str:
    """
    Price per litre times quantity, with two decimals.

    Either side that is empty or not a number counts as 0.
    """
    price = parse_float(price_per_litre) or 0.0
    quantity = parse_float(quantity_litres) or 0.0
    return f"{price * quantity:.2f}"


def product_card(product: Product) -> ProductCard:
    """List/home representation of a product."""
    return ProductCard(
        id=product.id,
        name=product.name,
        description=product.description,
        image_url=product.image_url,
        price_per_litre=product.price_per_litre,
        offer_price_per_litre=product.offer_price_per_litre,
        stock_quantity=product.stock_quantity,
        is_active=product.is_active,
        is_featured=product.is_featured,
        price_label=f"{CURRENCY}{format_number(product.price_per_litre)}/L",
        stock_label=f"{format_number(product.stock_quantity)}L",
    )


class ProductService:
    """
    Product editor screen.

    Responsibilities:
      - list products through the read cache
      - derive the form's total price
      - coerce the "Add New Product" form and insert one row
      - upload a product image to Storage for the form
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Helpers -----

    @staticmethod
    def coerce_form(form: ProductForm) -> ProductCreate:
        """
        Turn raw form strings into an insert payload.

        Raises:
            HTTPException(422): a required number is missing or a
                price/stock value is negative.
        """
        try:
            return ProductCreate.model_validate(
                {
                    "name": form.name,
                    "description": form.description,
                    "image_url": optional_text(form.image_url),
                    "price_per_litre": parse_float(form.price_per_litre),
                    "offer_price_per_litre": optional_float(form.offer_price_per_litre),
                    "stock_quantity": parse_int(form.stock_quantity),
                    "is_active": form.is_active,
                }
            )
        except ValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail={
                    "message": "Invalid product form",
                    "errors": exc.errors(include_url=False, include_context=False),
                    "form": form.model_dump(),
                },
            )

    @staticmethod
    def _validate_and_get_ext(content_type: str, file_bytes: bytes) -> str:
        if content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unsupported image type. Allowed: JPEG, PNG, WEBP.",
            )

        if len(file_bytes) > MAX_IMAGE_BYTES:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail="Image too large (max 5MB).",
            )

        return ALLOWED_IMAGE_CONTENT_TYPES[content_type]

    # ----- Form -----

    def form_view(self, form: ProductForm | None = None) -> ProductFormView:
        form = form or ProductForm()
        return ProductFormView(
            form=form,
            total_price=calculate_total_price(form.price_per_litre, form.quantity_litres),
        )

    def upload_form_image(
        self,
        store: Client,
        content_type: str,
        file_bytes: bytes,
    ) -> str:
        """
        Upload an image for the product form and return its public URL.

        Path pattern:
            products/<uuid>.<ext>
        """
        ext = self._validate_and_get_ext(content_type, file_bytes)
        path = f"products/{generate_filename(ext)}"
        return upload_to_storage(store, path, file_bytes, content_type)

    # ----- Page -----

    def page(self, store: Client, cache: QueryCache) -> AdminProductsPage:
        result = cache.fetch(CacheKey.ADMIN_PRODUCTS, lambda: self.repo.list_all(store))
        if not result.ok:
            return AdminProductsPage(status="error", error=result.error)
        return AdminProductsPage(products=[product_card(p) for p in result.data])

    def create_product(
        self,
        store: Client,
        cache: QueryCache,
        form: ProductForm,
    ) -> ProductCreated:
        """
        Insert one product, then invalidate every read that lists products.

        Raises:
            HTTPException(422): form did not coerce.
            HTTPException(502): the store rejected the insert.
        """
        payload = self.coerce_form(form)

        try:
            created = self.repo.create(store, payload.model_dump())
        except (APIError, httpx.HTTPError):
            logger.exception("Product insert failed for %r", payload.name)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail={"message": "Could not create product", "form": form.model_dump()},
            )

        cache.invalidate_for(Mutation.CREATE_PRODUCT)
        logger.info("Product %r created", payload.name)

        return ProductCreated(
            message="Product created successfully",
            product=product_card(created) if created else None,
            form=self.form_view(),
        )
