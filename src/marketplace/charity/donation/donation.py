"""Donation aggregate: money given to a charity.

A donation is either made directly from a charity's page, in which case it
is charged through the payment gateway on its own, or added on top of an
order at checkout and paid together with it. Checkout donations without a
chosen charity go to the general fund (``charity_id`` is empty).

A checkout donation on a cash-on-delivery order stays pending until the
order is delivered and the cash is collected. Only completed donations
count towards a charity's raised amount.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from marketplace.charity.donation.events import DonationCompleted, DonationFailed
from marketplace.domain import marketplace
from marketplace.payments.methods import PaymentMethod


class DonationStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@marketplace.aggregate
class Donation:
    user_id = Identifier(required=True)
    charity_id = Identifier()
    order_id = Identifier()
    amount = Float(required=True, min_value=0.01)
    payment_method = String(choices=PaymentMethod, required=True)
    transaction_id = String(max_length=100)
    status = String(choices=DonationStatus, default=DonationStatus.PENDING.value)
    failure_reason = String(max_length=255)
    anonymous = Boolean(default=False)
    message = Text()
    donated_at = DateTime()

    @classmethod
    def pending(
        cls,
        user_id,
        amount,
        payment_method,
        charity_id=None,
        order_id=None,
        anonymous=False,
        message=None,
    ):
        return cls(
            user_id=user_id,
            charity_id=charity_id,
            order_id=order_id,
            amount=amount,
            payment_method=payment_method,
            status=DonationStatus.PENDING.value,
            anonymous=bool(anonymous),
            message=message,
            donated_at=datetime.now(UTC),
        )

    @classmethod
    def completed(
        cls,
        user_id,
        amount,
        payment_method,
        charity_id=None,
        order_id=None,
        transaction_id=None,
        anonymous=False,
        message=None,
    ):
        donation = cls.pending(
            user_id,
            amount,
            payment_method,
            charity_id=charity_id,
            order_id=order_id,
            anonymous=anonymous,
            message=message,
        )
        donation.complete(transaction_id)
        return donation

    @classmethod
    def failed(cls, user_id, amount, payment_method, charity_id=None, reason=None, anonymous=False, message=None):
        donation = cls.pending(
            user_id, amount, payment_method, charity_id=charity_id, anonymous=anonymous, message=message
        )
        donation.fail(reason)
        return donation

    def _ensure_pending(self):
        if self.status != DonationStatus.PENDING.value:
            raise ValidationError({"status": [f"Donation is already {self.status}"]})

    def complete(self, transaction_id=None):
        self._ensure_pending()
        now = datetime.now(UTC)
        self.status = DonationStatus.COMPLETED.value
        self.transaction_id = transaction_id or self.transaction_id
        self.donated_at = now
        self.raise_(
            DonationCompleted(
                donation_id=str(self.id),
                user_id=str(self.user_id),
                charity_id=str(self.charity_id) if self.charity_id else None,
                order_id=str(self.order_id) if self.order_id else None,
                amount=self.amount,
                payment_method=self.payment_method,
                transaction_id=self.transaction_id,
                anonymous=bool(self.anonymous),
                donated_at=now,
            )
        )

    def fail(self, reason=None):
        self._ensure_pending()
        self.status = DonationStatus.FAILED.value
        self.failure_reason = reason
        self.raise_(
            DonationFailed(
                donation_id=str(self.id),
                user_id=str(self.user_id),
                charity_id=str(self.charity_id) if self.charity_id else None,
                amount=self.amount,
                reason=reason,
            )
        )

    @property
    def is_completed(self) -> bool:
        return self.status == DonationStatus.COMPLETED.value

    @property
    def is_pending(self) -> bool:
        return self.status == DonationStatus.PENDING.value
