"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Home & Garden",
                    "description": "Furniture, decor and tools",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=1000)


class UpdateCategoryRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    description: str | None = None
    image_url: str | None = Field(None, max_length=1000)
    is_active: bool | None = None


class CategoryIdResponse(BaseModel):
    category_id: str


class StorefrontStatsResponse(BaseModel):
    total_products: int
    total_categories: int
    total_orders: int


class StatusResponse(BaseModel):
    status: str = "ok"
