"""Domain events for the GoodsDonation aggregate."""

from protean.fields import Date, DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="GoodsDonation")
class GoodsDonationSubmitted:
    """A shopper offered unused goods for donation."""

    donation_id = Identifier(required=True)
    donor_id = Identifier(required=True)
    product_name = String(required=True)
    category = String(required=True)
    condition = String(required=True)
    quantity = Integer(required=True)
    estimated_value = Float()
    pickup_city = String(required=True)
    submitted_at = DateTime(required=True)


@marketplace.event(part_of="GoodsDonation")
class GoodsDonationStatusChanged:
    donation_id = Identifier(required=True)
    donor_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    admin_notes = Text()


@marketplace.event(part_of="GoodsDonation")
class GoodsPickupScheduled:
    """A pickup was arranged; the donation counts as approved from here."""

    donation_id = Identifier(required=True)
    donor_id = Identifier(required=True)
    pickup_date = Date(required=True)
    pickup_time = String(required=True)
    pickup_address = String()
    pickup_city = String()
