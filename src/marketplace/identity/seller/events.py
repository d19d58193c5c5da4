"""Domain events for the Seller aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Seller")
class SellerRegistered:
    """A signed-up user opened a store on the marketplace."""

    seller_id: Identifier(required=True)
    user_id: Identifier(required=True)
    email: String(required=True)
    business_name: String(required=True)
    city: String(required=True)
    registered_at: DateTime(required=True)


@marketplace.event(part_of="Seller")
class SellerProfileUpdated:
    seller_id: Identifier(required=True)
    business_name: String(required=True)
    city: String()


@marketplace.event(part_of="Seller")
class StoreSettingsUpdated:
    seller_id: Identifier(required=True)
    settings: String(required=True)  # JSON snapshot


@marketplace.event(part_of="Seller")
class SellerVerified:
    seller_id: Identifier(required=True)
    verified_at: DateTime(required=True)
