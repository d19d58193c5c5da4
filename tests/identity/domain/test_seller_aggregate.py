"""Tests for the Seller aggregate and store settings."""

import json

import pytest
from marketplace.identity.seller.events import SellerProfileUpdated, SellerRegistered, SellerVerified, StoreSettingsUpdated
from marketplace.identity.seller.seller import Seller, StoreSettings
from protean.exceptions import ValidationError


def _register(**overrides):
    values = {
        "user_id": "user-001",
        "email": "ayesha@example.pk",
        "full_name": "Ayesha Khan",
        "business_name": "Khan Electronics",
        "phone": "+92 300 1234567",
        "address": "12 Mall Road",
        "city": "Lahore",
        "business_type": "Electronics",
        "tax_id": "NTN-1234567-8",
    }
    values.update(overrides)
    return Seller.register(**values)


class TestRegistration:
    def test_register(self):
        seller = _register()
        assert seller.business_name == "Khan Electronics"
        assert seller.is_verified is False
        assert seller.store_settings.commission_rate == 15.0

    def test_register_raises_event(self):
        seller = _register()
        events = [e for e in seller._events if isinstance(e, SellerRegistered)]
        assert len(events) == 1
        assert events[0].city == "Lahore"

    def test_values_are_trimmed(self):
        seller = _register(business_name="  Khan Electronics  ")
        assert seller.business_name == "Khan Electronics"

    @pytest.mark.parametrize(
        "field, message",
        [
            ("full_name", "Full name is required"),
            ("business_name", "Business name is required"),
            ("phone", "Phone number is required"),
            ("address", "Address is required"),
            ("city", "City is required"),
            ("business_type", "Business type is required"),
            ("tax_id", "Tax ID is required"),
        ],
    )
    def test_required_fields(self, field, message):
        with pytest.raises(ValidationError) as exc:
            _register(**{field: "  "})
        assert exc.value.messages[field] == [message]

    def test_all_missing_fields_reported_together(self):
        with pytest.raises(ValidationError) as exc:
            _register(full_name="", city="")
        assert set(exc.value.messages) == {"full_name", "city"}

    def test_invalid_phone(self):
        with pytest.raises(ValidationError) as exc:
            _register(phone="call me")
        assert "phone" in exc.value.messages

    def test_unknown_business_type(self):
        with pytest.raises(ValidationError):
            _register(business_type="Weapons")

    def test_invalid_email(self):
        with pytest.raises(ValidationError) as exc:
            _register(email="not-an-email")
        assert "email" in exc.value.messages


class TestProfileUpdates:
    def test_partial_update(self):
        seller = _register()
        seller.update_profile(city="Karachi")
        assert seller.city == "Karachi"
        assert seller.business_name == "Khan Electronics"
        assert any(isinstance(e, SellerProfileUpdated) for e in seller._events)

    def test_cannot_blank_a_required_field(self):
        seller = _register()
        with pytest.raises(ValidationError):
            seller.update_profile(tax_id=" ")

    def test_unknown_field(self):
        seller = _register()
        with pytest.raises(ValidationError):
            seller.update_profile(is_verified=True)


class TestStoreSettings:
    def test_defaults(self):
        settings = StoreSettings()
        assert settings.to_dict() == {
            "description": "",
            "auto_fulfill": False,
            "email_notifications": True,
            "low_stock_alerts": True,
            "commission_rate": 15.0,
            "shipping_zones": ["Pakistan"],
            "return_policy": "30-day return policy",
        }

    def test_update_settings_keeps_other_values(self):
        seller = _register()
        seller.update_settings(auto_fulfill=True, shipping_zones=["Punjab", "Sindh"])

        assert seller.store_settings.auto_fulfill is True
        assert seller.store_settings.zones == ["Punjab", "Sindh"]
        assert seller.store_settings.low_stock_alerts is True

        event = next(e for e in seller._events if isinstance(e, StoreSettingsUpdated))
        assert json.loads(event.settings)["auto_fulfill"] is True

    @pytest.mark.parametrize("rate", [-1, 100.5])
    def test_commission_rate_must_be_a_percentage(self, rate):
        seller = _register()
        with pytest.raises(ValidationError):
            seller.update_settings(commission_rate=rate)

    def test_unknown_setting(self):
        seller = _register()
        with pytest.raises(ValidationError):
            seller.update_settings(theme="dark")


class TestVerification:
    def test_verify(self):
        seller = _register()
        seller.verify()
        assert seller.is_verified is True
        assert any(isinstance(e, SellerVerified) for e in seller._events)

    def test_cannot_verify_twice(self):
        seller = _register()
        seller.verify()
        with pytest.raises(ValidationError):
            seller.verify()
