"""Domain events for the Charity aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Charity")
class CharityRegistered:
    """A charity was listed and awaits verification."""

    charity_id = Identifier(required=True)
    name = String(required=True)
    category = String(required=True)
    target_amount = Float()
    registered_at = DateTime(required=True)


@marketplace.event(part_of="Charity")
class CharityVerified:
    charity_id = Identifier(required=True)
    verified_at = DateTime(required=True)


@marketplace.event(part_of="Charity")
class CharityRejected:
    charity_id = Identifier(required=True)
    reason = String()
    rejected_at = DateTime(required=True)


@marketplace.event(part_of="Charity")
class DonationReceived:
    """A completed donation was credited to the charity's raised amount."""

    charity_id = Identifier(required=True)
    donation_id = Identifier(required=True)
    amount = Float(required=True)
    raised_amount = Float(required=True)
