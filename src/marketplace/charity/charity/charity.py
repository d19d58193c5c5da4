"""Charity aggregate: an organisation shoppers can donate to.

Charities are listed from the seller dashboard and start out unverified.
Every completed donation raises ``raised_amount``; progress is measured
against ``target_amount``.

Verification:
    PENDING → VERIFIED | REJECTED
    REJECTED → VERIFIED (after review)
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from marketplace.charity.charity.events import CharityRegistered, CharityRejected, CharityVerified, DonationReceived
from marketplace.domain import marketplace
from marketplace.shared.contact import is_valid_email

_UNSET = object()

# Impact estimates shown on the donation page
RUPEES_PER_HUNDRED_HELPED = 1000
RUPEES_PER_PROJECT = 50000


class CharityCategory(Enum):
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    SOCIAL_WELFARE = "Social Welfare"
    ENVIRONMENT = "Environment"
    HOUSING = "Housing"
    EMERGENCY = "Emergency"
    ANIMAL_WELFARE = "Animal Welfare"
    OTHER = "Other"


class VerificationStatus(Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


@marketplace.aggregate
class Charity:
    name = String(max_length=200)
    description = Text()
    category = String(choices=CharityCategory, default=CharityCategory.OTHER.value)
    website_url = String(max_length=500)
    contact_email = String(max_length=254)
    contact_phone = String(max_length=20)
    address = String(max_length=500)
    city = String(max_length=100)
    province = String(max_length=100)
    image_url = String(max_length=1000)
    target_amount = Float(default=0.0)
    raised_amount = Float(default=0.0)
    is_active = Boolean(default=True)
    verification_status = String(choices=VerificationStatus, default=VerificationStatus.PENDING.value)
    rejection_reason = Text()
    created_by = Identifier()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def name_is_required(self):
        if not (self.name or "").strip():
            raise ValidationError({"name": ["Charity name is required"]})

    @invariant.post
    def amounts_must_not_be_negative(self):
        if self.target_amount is not None and self.target_amount < 0:
            raise ValidationError({"target_amount": ["Target amount cannot be negative"]})
        if self.raised_amount is not None and self.raised_amount < 0:
            raise ValidationError({"raised_amount": ["Raised amount cannot be negative"]})

    @invariant.post
    def contact_email_must_be_valid(self):
        if self.contact_email and not is_valid_email(self.contact_email):
            raise ValidationError({"contact_email": ["Please enter a valid email address"]})

    @classmethod
    def register(
        cls,
        name,
        category=CharityCategory.OTHER.value,
        description=None,
        website_url=None,
        contact_email=None,
        contact_phone=None,
        address=None,
        city=None,
        province=None,
        image_url=None,
        target_amount=0.0,
        is_active=True,
        created_by=None,
    ):
        now = datetime.now(UTC)
        charity = cls(
            name=name,
            category=category,
            description=description,
            website_url=website_url,
            contact_email=contact_email,
            contact_phone=contact_phone,
            address=address,
            city=city,
            province=province,
            image_url=image_url,
            target_amount=target_amount or 0.0,
            raised_amount=0.0,
            is_active=is_active,
            verification_status=VerificationStatus.PENDING.value,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        charity.raise_(
            CharityRegistered(
                charity_id=str(charity.id),
                name=charity.name,
                category=charity.category,
                target_amount=charity.target_amount,
                registered_at=now,
            )
        )
        return charity

    def update(self, **changes):
        """Partial update of the charity's listing details."""
        editable = {
            "name",
            "description",
            "category",
            "website_url",
            "contact_email",
            "contact_phone",
            "address",
            "city",
            "province",
            "image_url",
            "target_amount",
            "is_active",
        }
        unknown = set(changes) - editable
        if unknown:
            raise ValidationError({"charity": [f"Cannot update: {', '.join(sorted(unknown))}"]})

        for field_name, value in changes.items():
            if value is not None:
                setattr(self, field_name, value)
        self.updated_at = datetime.now(UTC)

    def verify(self):
        if self.verification_status == VerificationStatus.VERIFIED.value:
            raise ValidationError({"verification_status": ["Charity is already verified"]})

        now = datetime.now(UTC)
        self.verification_status = VerificationStatus.VERIFIED.value
        self.rejection_reason = None
        self.updated_at = now
        self.raise_(CharityVerified(charity_id=str(self.id), verified_at=now))

    def reject(self, reason=None):
        if self.verification_status != VerificationStatus.PENDING.value:
            raise ValidationError({"verification_status": ["Only pending charities can be rejected"]})

        now = datetime.now(UTC)
        self.verification_status = VerificationStatus.REJECTED.value
        self.rejection_reason = reason
        self.updated_at = now
        self.raise_(CharityRejected(charity_id=str(self.id), reason=reason, rejected_at=now))

    def receive_donation(self, donation_id, amount):
        if amount <= 0:
            raise ValidationError({"amount": ["Donation amount must be greater than 0"]})

        self.raised_amount = round((self.raised_amount or 0.0) + amount, 2)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            DonationReceived(
                charity_id=str(self.id),
                donation_id=str(donation_id),
                amount=amount,
                raised_amount=self.raised_amount,
            )
        )

    # -------------------------------------------------------------------
    # Impact
    # -------------------------------------------------------------------
    @property
    def progress_percentage(self) -> float:
        if not self.target_amount:
            return 0.0
        return round(min(100.0, (self.raised_amount or 0.0) / self.target_amount * 100), 1)

    @property
    def people_helped(self) -> int:
        return int((self.raised_amount or 0) // RUPEES_PER_HUNDRED_HELPED) * 100

    @property
    def projects_completed(self) -> int:
        return int((self.raised_amount or 0) // RUPEES_PER_PROJECT)
