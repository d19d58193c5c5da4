"""Domain events for the Donation aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Donation")
class DonationCompleted:
    """Money for a charity was collected, directly or with an order."""

    donation_id = Identifier(required=True)
    user_id = Identifier(required=True)
    charity_id = Identifier()
    order_id = Identifier()
    amount = Float(required=True)
    payment_method = String(required=True)
    transaction_id = String()
    anonymous = Boolean(default=False)
    donated_at = DateTime(required=True)


@marketplace.event(part_of="Donation")
class DonationFailed:
    donation_id = Identifier(required=True)
    user_id = Identifier(required=True)
    charity_id = Identifier()
    amount = Float(required=True)
    reason = String()
