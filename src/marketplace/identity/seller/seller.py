"""Seller aggregate: a store run by a signed-up user.

The user account itself lives with the external auth provider; the seller
record keeps the business details shown on the dashboard and the store's
settings.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String, Text, ValueObject

from marketplace.domain import marketplace
from marketplace.identity.seller.events import (
    SellerProfileUpdated,
    SellerRegistered,
    SellerVerified,
    StoreSettingsUpdated,
)
from marketplace.shared.contact import is_valid_email, is_valid_phone


class BusinessType(Enum):
    ELECTRONICS = "Electronics"
    FASHION = "Fashion & Apparel"
    HOME_GARDEN = "Home & Garden"
    SPORTS = "Sports & Fitness"
    BOOKS = "Books & Education"
    HEALTH_BEAUTY = "Health & Beauty"
    AUTOMOTIVE = "Automotive"
    FOOD = "Food & Beverages"
    TOYS_GAMES = "Toys & Games"
    OTHER = "Other"


# Field → message, in the order the registration form shows them
REQUIRED_PROFILE_FIELDS = {
    "full_name": "Full name is required",
    "business_name": "Business name is required",
    "phone": "Phone number is required",
    "address": "Address is required",
    "city": "City is required",
    "business_type": "Business type is required",
    "tax_id": "Tax ID is required",
}


@marketplace.value_object(part_of="Seller")
class StoreSettings:
    """How a seller runs their store."""

    description: Text(default="")
    auto_fulfill: Boolean(default=False)
    email_notifications: Boolean(default=True)
    low_stock_alerts: Boolean(default=True)
    commission_rate: Float(default=15.0)
    shipping_zones: Text(default='["Pakistan"]')  # JSON array of zone names
    return_policy: String(max_length=500, default="30-day return policy")

    @invariant.post
    def commission_rate_must_be_a_percentage(self):
        if self.commission_rate is not None and not 0 <= self.commission_rate <= 100:
            raise ValidationError({"commission_rate": ["Commission rate must be between 0 and 100"]})

    @property
    def zones(self) -> list[str]:
        return json.loads(self.shipping_zones) if self.shipping_zones else []

    def to_dict(self) -> dict:
        return {
            "description": self.description or "",
            "auto_fulfill": self.auto_fulfill,
            "email_notifications": self.email_notifications,
            "low_stock_alerts": self.low_stock_alerts,
            "commission_rate": self.commission_rate,
            "shipping_zones": self.zones,
            "return_policy": self.return_policy,
        }


def profile_errors(values: dict) -> dict:
    errors = {
        field: [message] for field, message in REQUIRED_PROFILE_FIELDS.items() if not str(values.get(field) or "").strip()
    }
    if values.get("phone") and not is_valid_phone(values["phone"]):
        errors.setdefault("phone", ["Please enter a valid phone number"])
    return errors


@marketplace.aggregate
class Seller:
    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    full_name: String(max_length=200)
    business_name: String(max_length=200)
    phone: String(max_length=20)
    address: String(max_length=500)
    city: String(max_length=100)
    business_type: String(choices=BusinessType)
    tax_id: String(max_length=50)
    is_verified: Boolean(default=False)
    settings: ValueObject(StoreSettings)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def email_must_be_valid(self):
        if self.email and not is_valid_email(self.email):
            raise ValidationError({"email": ["Please enter a valid email address"]})

    @classmethod
    def register(cls, user_id, email, full_name, business_name, phone, address, city, business_type, tax_id):
        values = {
            "full_name": full_name,
            "business_name": business_name,
            "phone": phone,
            "address": address,
            "city": city,
            "business_type": business_type,
            "tax_id": tax_id,
        }
        errors = profile_errors(values)
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        seller = cls(
            user_id=user_id,
            email=email,
            **{name: value.strip() for name, value in values.items()},
            is_verified=False,
            settings=StoreSettings(),
            created_at=now,
            updated_at=now,
        )
        seller.raise_(
            SellerRegistered(
                seller_id=str(seller.id),
                user_id=str(user_id),
                email=email,
                business_name=seller.business_name,
                city=seller.city,
                registered_at=now,
            )
        )
        return seller

    def update_profile(self, **changes):
        editable = set(REQUIRED_PROFILE_FIELDS)
        unknown = set(changes) - editable
        if unknown:
            raise ValidationError({"profile": [f"Cannot update: {', '.join(sorted(unknown))}"]})

        updated = {name: getattr(self, name) for name in editable}
        updated.update({name: value for name, value in changes.items() if value is not None})
        errors = profile_errors(updated)
        if errors:
            raise ValidationError(errors)

        for name, value in changes.items():
            if value is not None:
                setattr(self, name, value.strip())
        self.updated_at = datetime.now(UTC)

        self.raise_(SellerProfileUpdated(seller_id=str(self.id), business_name=self.business_name, city=self.city))

    def update_settings(self, **changes):
        current = self.store_settings.to_dict()
        for name, value in changes.items():
            if name not in current:
                raise ValidationError({"settings": [f"Unknown store setting: {name}"]})
            if value is not None:
                current[name] = value

        current["shipping_zones"] = json.dumps(list(current["shipping_zones"]))
        self.settings = StoreSettings(**current)
        self.updated_at = datetime.now(UTC)

        self.raise_(StoreSettingsUpdated(seller_id=str(self.id), settings=json.dumps(self.store_settings.to_dict())))

    def verify(self):
        if self.is_verified:
            raise ValidationError({"is_verified": ["Seller is already verified"]})

        now = datetime.now(UTC)
        self.is_verified = True
        self.updated_at = now
        self.raise_(SellerVerified(seller_id=str(self.id), verified_at=now))

    @property
    def store_settings(self) -> StoreSettings:
        return self.settings or StoreSettings()
