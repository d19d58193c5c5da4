"""GoodsDonation aggregate: unused goods a shopper gives away.

Donors describe the item, its condition and where it can be collected; the
team reviews the offer, schedules a pickup and completes it once the goods
reach the charity.

State Machine:
    PENDING → APPROVED | REJECTED
    APPROVED → PICKED_UP | REJECTED
    PICKED_UP → COMPLETED
    REJECTED, COMPLETED → (terminal)
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Date, DateTime, Float, Identifier, Integer, String, Text

from marketplace.charity.goods.events import GoodsDonationStatusChanged, GoodsDonationSubmitted, GoodsPickupScheduled
from marketplace.domain import marketplace
from marketplace.shared.contact import is_valid_email, is_valid_phone


class GoodsDonationStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PICKED_UP = "picked_up"
    COMPLETED = "completed"


class GoodsCategory(Enum):
    ELECTRONICS = "Electronics"
    FASHION = "Fashion"
    HOME_GARDEN = "Home & Garden"
    SPORTS = "Sports"
    BOOKS = "Books"
    TOYS_GAMES = "Toys & Games"
    BABY_KIDS = "Baby & Kids"
    HEALTH_BEAUTY = "Health & Beauty"
    AUTOMOTIVE = "Automotive"
    OTHER = "Other"


class GoodsCondition(Enum):
    BRAND_NEW = "Brand New"
    LIKE_NEW = "Like New"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_REPAIR = "Needs Repair"


_VALID_TRANSITIONS = {
    GoodsDonationStatus.PENDING: {GoodsDonationStatus.APPROVED, GoodsDonationStatus.REJECTED},
    GoodsDonationStatus.APPROVED: {GoodsDonationStatus.PICKED_UP, GoodsDonationStatus.REJECTED},
    GoodsDonationStatus.PICKED_UP: {GoodsDonationStatus.COMPLETED},
    GoodsDonationStatus.REJECTED: set(),
    GoodsDonationStatus.COMPLETED: set(),
}


@marketplace.aggregate
class GoodsDonation:
    donor_id = Identifier(required=True)
    product_name = String(max_length=255)
    description = Text()
    condition = String(choices=GoodsCondition, required=True)
    category = String(choices=GoodsCategory, required=True)
    estimated_value = Float(default=0.0)
    quantity = Integer(default=1)

    donor_name = String(max_length=200)
    donor_email = String(max_length=254)
    donor_phone = String(max_length=20)
    pickup_address = String(max_length=500)
    pickup_city = String(max_length=100)
    preferred_pickup_date = Date()
    additional_notes = Text()
    image_urls = Text()  # JSON array of public URLs

    status = String(choices=GoodsDonationStatus, default=GoodsDonationStatus.PENDING.value)
    admin_notes = Text()
    pickup_date = Date()
    pickup_time = String(max_length=50)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def quantity_must_be_positive(self):
        if self.quantity is None or self.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

    @invariant.post
    def estimated_value_cannot_be_negative(self):
        if self.estimated_value is not None and self.estimated_value < 0:
            raise ValidationError({"estimated_value": ["Estimated value cannot be negative"]})

    @classmethod
    def submit(
        cls,
        donor_id,
        product_name,
        condition,
        category,
        donor_name,
        donor_email,
        donor_phone,
        pickup_address,
        pickup_city,
        description=None,
        estimated_value=0.0,
        quantity=1,
        preferred_pickup_date=None,
        additional_notes=None,
        image_urls=None,
    ):
        required = {
            "product_name": (product_name, "Product name is required"),
            "donor_name": (donor_name, "Your name is required"),
            "donor_email": (donor_email, "Your email is required"),
            "donor_phone": (donor_phone, "Your phone number is required"),
            "pickup_address": (pickup_address, "Pickup address is required"),
            "pickup_city": (pickup_city, "Pickup city is required"),
        }
        errors = {field: [message] for field, (value, message) in required.items() if not str(value or "").strip()}
        if errors:
            raise ValidationError(errors)
        if not is_valid_email(donor_email):
            raise ValidationError({"donor_email": ["Please enter a valid email address"]})
        if not is_valid_phone(donor_phone):
            raise ValidationError({"donor_phone": ["Please enter a valid phone number"]})

        now = datetime.now(UTC)
        donation = cls(
            donor_id=donor_id,
            product_name=product_name.strip(),
            description=description,
            condition=condition,
            category=category,
            estimated_value=estimated_value or 0.0,
            quantity=quantity or 1,
            donor_name=donor_name.strip(),
            donor_email=donor_email.strip(),
            donor_phone=donor_phone.strip(),
            pickup_address=pickup_address.strip(),
            pickup_city=pickup_city.strip(),
            preferred_pickup_date=preferred_pickup_date,
            additional_notes=additional_notes,
            image_urls=json.dumps(list(image_urls or [])),
            status=GoodsDonationStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        donation.raise_(
            GoodsDonationSubmitted(
                donation_id=str(donation.id),
                donor_id=str(donor_id),
                product_name=donation.product_name,
                category=category,
                condition=condition,
                quantity=donation.quantity,
                estimated_value=donation.estimated_value,
                pickup_city=donation.pickup_city,
                submitted_at=now,
            )
        )
        return donation

    def change_status(self, new_status, admin_notes=None):
        current = GoodsDonationStatus(self.status)
        target = GoodsDonationStatus(new_status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError(
                {"status": [f"Cannot change donation status from {current.value} to {target.value}"]}
            )

        self.status = target.value
        if admin_notes:
            self.admin_notes = admin_notes
        self.updated_at = datetime.now(UTC)

        self.raise_(
            GoodsDonationStatusChanged(
                donation_id=str(self.id),
                donor_id=str(self.donor_id),
                previous_status=current.value,
                new_status=target.value,
                admin_notes=admin_notes,
            )
        )

    def schedule_pickup(self, pickup_date, pickup_time, admin_notes=None):
        """Arrange collection; a pending offer is approved by scheduling it."""
        if not pickup_date or not (pickup_time or "").strip():
            raise ValidationError({"pickup": ["Pickup date and time are required"]})

        status = GoodsDonationStatus(self.status)
        if status not in (GoodsDonationStatus.PENDING, GoodsDonationStatus.APPROVED):
            raise ValidationError({"status": [f"Cannot schedule a pickup for a {status.value} donation"]})

        if status == GoodsDonationStatus.PENDING:
            self.change_status(GoodsDonationStatus.APPROVED.value, admin_notes=admin_notes)
        elif admin_notes:
            self.admin_notes = admin_notes

        self.pickup_date = pickup_date
        self.pickup_time = pickup_time.strip()
        self.updated_at = datetime.now(UTC)

        self.raise_(
            GoodsPickupScheduled(
                donation_id=str(self.id),
                donor_id=str(self.donor_id),
                pickup_date=self.pickup_date,
                pickup_time=self.pickup_time,
                pickup_address=self.pickup_address,
                pickup_city=self.pickup_city,
            )
        )

    @property
    def images(self) -> list[str]:
        return json.loads(self.image_urls) if self.image_urls else []
