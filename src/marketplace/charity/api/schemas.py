"""Pydantic request/response schemas for charities, donations and goods donations."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


# --- Charities ---


class RegisterCharityRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Edhi Foundation",
                    "description": "Ambulance service, shelters and orphanages",
                    "category": "Healthcare",
                    "city": "Karachi",
                    "province": "Sindh",
                    "target_amount": 5000000,
                }
            ]
        }
    }

    name: str = Field(..., max_length=200)
    description: str | None = None
    category: str | None = Field(None, max_length=50)
    website_url: str | None = Field(None, max_length=500)
    contact_email: str | None = Field(None, max_length=254)
    contact_phone: str | None = Field(None, max_length=20)
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)
    province: str | None = Field(None, max_length=100)
    image_url: str | None = Field(None, max_length=1000)
    target_amount: float | None = None
    is_active: bool = True


class UpdateCharityRequest(BaseModel):
    name: str | None = Field(None, max_length=200)
    description: str | None = None
    category: str | None = Field(None, max_length=50)
    website_url: str | None = Field(None, max_length=500)
    contact_email: str | None = Field(None, max_length=254)
    contact_phone: str | None = Field(None, max_length=20)
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)
    province: str | None = Field(None, max_length=100)
    image_url: str | None = Field(None, max_length=1000)
    target_amount: float | None = None
    is_active: bool | None = None


class RejectCharityRequest(BaseModel):
    reason: str | None = None


class CharityIdResponse(BaseModel):
    charity_id: str


# --- Monetary donations ---


class MakeDonationRequest(BaseModel):
    charity_id: str
    amount: float
    payment_method: str = Field(..., max_length=20)
    payment_details: dict[str, str] = Field(default_factory=dict)
    anonymous: bool = False
    message: str | None = None


class DonationResultResponse(BaseModel):
    success: bool
    donation_id: str
    message: str


# --- Goods donations ---


class DonationPhotoUpload(BaseModel):
    filename: str = Field(..., max_length=255)
    content_type: str = Field(..., max_length=100)
    data: str  # base64


class SubmitGoodsDonationRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_name": "Winter jackets",
                    "condition": "Brand New",
                    "category": "Fashion",
                    "estimated_value": 12000,
                    "quantity": 4,
                    "donor_name": "Sana Iqbal",
                    "donor_email": "sana@example.pk",
                    "donor_phone": "0300-1234567",
                    "pickup_address": "22-B Gulberg III",
                    "pickup_city": "Lahore",
                    "images": [],
                }
            ]
        }
    }

    product_name: str | None = Field(None, max_length=255)
    description: str | None = None
    condition: str = Field(..., max_length=50)
    category: str = Field(..., max_length=50)
    estimated_value: float = 0.0
    quantity: int = 1
    donor_name: str | None = Field(None, max_length=200)
    donor_email: str | None = Field(None, max_length=254)
    donor_phone: str | None = Field(None, max_length=20)
    pickup_address: str | None = Field(None, max_length=500)
    pickup_city: str | None = Field(None, max_length=100)
    preferred_pickup_date: date | None = None
    additional_notes: str | None = None
    images: list[DonationPhotoUpload] = Field(default_factory=list)


class GoodsDonationIdResponse(BaseModel):
    donation_id: str


class UpdateGoodsStatusRequest(BaseModel):
    status: str = Field(..., max_length=20)
    admin_notes: str | None = None


class SchedulePickupRequest(BaseModel):
    pickup_date: date
    pickup_time: str = Field(..., max_length=50)
    admin_notes: str | None = None


class StatusResponse(BaseModel):
    status: str = "ok"
