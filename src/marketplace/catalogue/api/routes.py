"""FastAPI endpoints for the storefront: products, categories and headline stats."""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from marketplace.catalogue.api.schemas import (
    CategoryIdResponse,
    CreateCategoryRequest,
    StatusResponse,
    StorefrontStatsResponse,
    UpdateCategoryRequest,
)
from marketplace.catalogue.category.management import CreateCategory, UpdateCategory
from marketplace.catalogue.product.listing import RecordProductView
from marketplace.catalogue.storefront import (
    get_category,
    get_product,
    list_categories,
    list_products,
    storefront_stats,
)
from marketplace.identity.api.dependencies import current_seller

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
stats_router = APIRouter(prefix="/stats", tags=["storefront"])


# --- Product endpoints ---


@product_router.get("")
def products(
    search: str | None = Query(None, max_length=200),
    category_id: str | None = None,
    limit: int | None = Query(None, ge=1, le=200),
) -> list[dict]:
    return list_products(search=search, category_id=category_id, limit=limit)


@product_router.get("/{product_id}")
def product_detail(product_id: str) -> dict:
    return get_product(product_id)


@product_router.post("/{product_id}/views", response_model=StatusResponse)
def record_view(product_id: str) -> StatusResponse:
    current_domain.process(RecordProductView(product_id=product_id), asynchronous=False)
    return StatusResponse()


# --- Category endpoints ---


@category_router.get("")
def categories(search: str | None = Query(None, max_length=100)) -> list[dict]:
    return list_categories(search=search)


@category_router.get("/{category_id}")
def category_detail(category_id: str) -> dict:
    return get_category(category_id)


@category_router.post("", status_code=201, response_model=CategoryIdResponse, dependencies=[Depends(current_seller)])
def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(name=body.name, description=body.description, image_url=body.image_url)
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.put("/{category_id}", response_model=StatusResponse, dependencies=[Depends(current_seller)])
def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
        image_url=body.image_url,
        is_active=body.is_active,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# --- Stats ---


@stats_router.get("", response_model=StorefrontStatsResponse)
def stats() -> StorefrontStatsResponse:
    return StorefrontStatsResponse(**storefront_stats())
