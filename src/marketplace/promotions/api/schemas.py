"""Pydantic request/response schemas for discount codes."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ApplyDiscountRequest(BaseModel):
    code: str = Field(..., max_length=50)
    order_amount: float = Field(..., ge=0)


class DiscountApplicationResponse(BaseModel):
    success: bool
    discount_amount: float
    message: str
    code: str | None = None


class CreateDiscountCodeRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "EID25",
                    "discount_type": "percentage",
                    "value": 25,
                    "min_amount": 3000,
                    "max_discount": 1500,
                    "description": "Eid special: 25% off",
                    "usage_limit": 500,
                }
            ]
        }
    }

    code: str = Field(..., max_length=50)
    discount_type: str = Field(..., max_length=20)
    value: float
    min_amount: float | None = None
    max_discount: float | None = None
    description: str | None = None
    usage_limit: int | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool = True


class UpdateDiscountCodeRequest(BaseModel):
    discount_type: str | None = Field(None, max_length=20)
    value: float | None = None
    min_amount: float | None = None
    max_discount: float | None = None
    description: str | None = None
    usage_limit: int | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool | None = None


class DiscountCodeIdResponse(BaseModel):
    discount_code_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
