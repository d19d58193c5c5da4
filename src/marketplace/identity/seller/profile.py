"""Seller profile and store settings: commands and handler."""

import json

from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.seller.seller import Seller


@marketplace.command(part_of="Seller")
class UpdateSellerProfile:
    seller_id: Identifier(required=True)
    full_name: String(max_length=200)
    business_name: String(max_length=200)
    phone: String(max_length=20)
    address: String(max_length=500)
    city: String(max_length=100)
    business_type: String(max_length=50)
    tax_id: String(max_length=50)


@marketplace.command(part_of="Seller")
class UpdateStoreSettings:
    seller_id: Identifier(required=True)
    description: Text()
    auto_fulfill: Boolean()
    email_notifications: Boolean()
    low_stock_alerts: Boolean()
    commission_rate: Float()
    shipping_zones: Text()  # JSON array of zone names
    return_policy: String(max_length=500)


@marketplace.command(part_of="Seller")
class VerifySeller:
    seller_id: Identifier(required=True)


_PROFILE_FIELDS = ("full_name", "business_name", "phone", "address", "city", "business_type", "tax_id")
_SETTINGS_FIELDS = (
    "description",
    "auto_fulfill",
    "email_notifications",
    "low_stock_alerts",
    "commission_rate",
    "return_policy",
)


@marketplace.command_handler(part_of=Seller)
class ManageSellerHandler:
    @handle(UpdateSellerProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Seller)
        seller = repo.get(command.seller_id)
        seller.update_profile(**{name: getattr(command, name) for name in _PROFILE_FIELDS})
        repo.add(seller)

    @handle(UpdateStoreSettings)
    def update_settings(self, command):
        repo = current_domain.repository_for(Seller)
        seller = repo.get(command.seller_id)
        changes = {name: getattr(command, name) for name in _SETTINGS_FIELDS}
        if command.shipping_zones is not None:
            changes["shipping_zones"] = json.loads(command.shipping_zones)
        seller.update_settings(**changes)
        repo.add(seller)

    @handle(VerifySeller)
    def verify_seller(self, command):
        repo = current_domain.repository_for(Seller)
        seller = repo.get(command.seller_id)
        seller.verify()
        repo.add(seller)
