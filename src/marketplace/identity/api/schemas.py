"""Pydantic request/response schemas for authentication and seller accounts."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Auth ---


class SignUpRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"email": "ayesha@example.pk", "password": "s3cret!", "full_name": "Ayesha Khan"}]
        }
    }

    email: str = Field(..., max_length=254)
    password: str
    full_name: str | None = Field(None, max_length=200)


class SignInRequest(BaseModel):
    email: str = Field(..., max_length=254)
    password: str


class SessionResponse(BaseModel):
    user_id: str
    email: str
    full_name: str | None = None
    access_token: str | None = None


class UserResponse(BaseModel):
    user_id: str
    email: str
    full_name: str | None = None
    seller_id: str | None = None


# --- Sellers ---


class RegisterSellerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "full_name": "Ayesha Khan",
                    "business_name": "Khan Electronics",
                    "phone": "+92 300 1234567",
                    "address": "12 Mall Road",
                    "city": "Lahore",
                    "business_type": "Electronics",
                    "tax_id": "NTN-1234567-8",
                }
            ]
        }
    }

    full_name: str | None = Field(None, max_length=200)
    business_name: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=20)
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)
    business_type: str | None = Field(None, max_length=50)
    tax_id: str | None = Field(None, max_length=50)


class UpdateSellerProfileRequest(RegisterSellerRequest):
    pass


class UpdateStoreSettingsRequest(BaseModel):
    description: str | None = None
    auto_fulfill: bool | None = None
    email_notifications: bool | None = None
    low_stock_alerts: bool | None = None
    commission_rate: float | None = Field(None, ge=0, le=100)
    shipping_zones: list[str] | None = None
    return_policy: str | None = Field(None, max_length=500)


class SellerIdResponse(BaseModel):
    seller_id: str


# --- Seller products and orders ---


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Samsung Galaxy A54",
                    "description": "128GB, Awesome Black",
                    "category_id": "cat-electronics",
                    "price": 89999,
                    "original_price": 99999,
                    "stock_quantity": 25,
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    category_id: str | None = None
    price: float | None = None
    original_price: float | None = None
    stock_quantity: int = 0
    image_url: str | None = Field(None, max_length=1000)


class UpdateProductRequest(BaseModel):
    name: str | None = Field(None, max_length=255)
    description: str | None = None
    category_id: str | None = None
    price: float | None = None
    original_price: float | None = None
    stock_quantity: int | None = None
    image_url: str | None = Field(None, max_length=1000)
    is_active: bool | None = None


class ProductIdResponse(BaseModel):
    product_id: str


class ImageUrlResponse(BaseModel):
    image_url: str


class UpdateOrderStatusRequest(BaseModel):
    status: str = Field(..., max_length=20)
    tracking_number: str | None = Field(None, max_length=100)


class StatusResponse(BaseModel):
    status: str = "ok"
