"""Pydantic request/response schemas for carts, checkout, orders and returns."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Cart ---


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartQuantityRequest(BaseModel):
    quantity: int


# --- Checkout ---


class QuoteRequest(BaseModel):
    discount_code: str | None = Field(None, max_length=50)
    donation_amount: float = 0.0


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Ali",
                    "last_name": "Raza",
                    "email": "ali@example.pk",
                    "phone": "+92 321 7654321",
                    "address": "House 4, Street 9, F-7",
                    "city": "Islamabad",
                    "payment_method": "easypaisa",
                    "payment_details": {"phone": "03001234567", "otp": "123456"},
                    "discount_code": "WELCOME10",
                    "donation_amount": 200,
                }
            ]
        }
    }

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=254)
    phone: str | None = Field(None, max_length=20)
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    postal_code: str | None = Field(None, max_length=20)
    notes: str | None = None
    payment_method: str = Field(..., max_length=20)
    payment_details: dict[str, str] = Field(default_factory=dict)
    discount_code: str | None = Field(None, max_length=50)
    donation_amount: float = 0.0
    charity_id: str | None = None


class OrderPlacedResponse(BaseModel):
    order_id: str
    order_number: str
    transaction_id: str | None = None
    final_amount: float
    formatted_total: str


# --- Returns ---


class RequestReturnRequest(BaseModel):
    order_id: str
    order_item_id: str
    reason: str = Field(..., max_length=255)
    details: str | None = None


class ResolveReturnRequest(BaseModel):
    status: str = Field(..., max_length=20)
    notes: str | None = None


class ReturnIdResponse(BaseModel):
    return_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
