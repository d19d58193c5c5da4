"""DiscountCode aggregate: seller-managed promotional codes.

A code takes either a percentage or a fixed rupee amount off an order that
meets its minimum. Codes can be limited in time (``valid_from`` /
``valid_until``) and in the number of redemptions (``usage_limit``). Every
redemption is kept as a ``DiscountUsage`` row so sellers can see who saved
how much.
"""

import math
import re
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, Text

from marketplace.domain import marketplace
from marketplace.payments.pricing import discount_for
from marketplace.promotions.events import DiscountCodeCreated, DiscountCodeRedeemed, DiscountCodeUpdated
from marketplace.shared.money import format_price

_UNSET = object()
_CODE_PATTERN = re.compile(r"^[A-Z0-9_-]+$")

INVALID_CODE_MESSAGE = "The discount code you entered is not valid."
EXPIRED_CODE_MESSAGE = "This discount code has expired."
EXHAUSTED_CODE_MESSAGE = "This discount code has reached its usage limit."


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so they compare with stored values."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


@marketplace.entity(part_of="DiscountCode")
class DiscountUsage:
    customer_id = Identifier()
    order_id = Identifier(required=True)
    discount_amount = Float(required=True, min_value=0.0)
    used_at = DateTime(required=True)


@marketplace.aggregate
class DiscountCode:
    code = String(required=True, max_length=50)
    discount_type = String(choices=DiscountType, required=True)
    value = Float(required=True)
    min_amount = Float(default=0.0)
    max_discount = Float()
    description = Text()
    is_active = Boolean(default=True)
    usage_limit = Integer()
    usage_count = Integer(default=0)
    valid_from = DateTime()
    valid_until = DateTime()
    seller_id = Identifier()
    usages = HasMany(DiscountUsage)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def code_must_be_uppercase_alphanumeric(self):
        if self.code is not None and not _CODE_PATTERN.match(self.code):
            raise ValidationError({"code": ["Code may only contain letters, digits, hyphens and underscores"]})

    @invariant.post
    def value_must_suit_discount_type(self):
        if self.value is None:
            return
        if self.discount_type == DiscountType.PERCENTAGE.value and not 0 < self.value <= 100:
            raise ValidationError({"value": ["Percentage discounts must be greater than 0 and at most 100"]})
        if self.discount_type == DiscountType.FIXED.value and self.value <= 0:
            raise ValidationError({"value": ["Fixed discounts must be greater than 0"]})

    @invariant.post
    def amounts_must_not_be_negative(self):
        if self.min_amount is not None and self.min_amount < 0:
            raise ValidationError({"min_amount": ["Minimum order amount cannot be negative"]})
        if self.max_discount is not None and self.max_discount < 0:
            raise ValidationError({"max_discount": ["Maximum discount cannot be negative"]})
        if self.usage_limit is not None and self.usage_limit < 1:
            raise ValidationError({"usage_limit": ["Usage limit must be at least 1"]})

    @invariant.post
    def validity_window_must_be_ordered(self):
        if self.valid_from and self.valid_until and as_utc(self.valid_until) <= as_utc(self.valid_from):
            raise ValidationError({"valid_until": ["End of validity must be after its start"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        code,
        discount_type,
        value,
        min_amount=0.0,
        max_discount=None,
        description=None,
        usage_limit=None,
        valid_from=None,
        valid_until=None,
        is_active=True,
        seller_id=None,
    ):
        now = datetime.now(UTC)
        discount = cls(
            code=(code or "").strip().upper(),
            discount_type=discount_type,
            value=value,
            min_amount=min_amount or 0.0,
            max_discount=max_discount,
            description=description,
            usage_limit=usage_limit,
            usage_count=0,
            valid_from=as_utc(valid_from) or now,
            valid_until=as_utc(valid_until),
            is_active=is_active,
            seller_id=seller_id,
            created_at=now,
            updated_at=now,
        )
        discount.raise_(
            DiscountCodeCreated(
                discount_code_id=str(discount.id),
                code=discount.code,
                discount_type=discount.discount_type,
                value=discount.value,
                min_amount=discount.min_amount,
                valid_until=discount.valid_until,
            )
        )
        return discount

    def update(
        self,
        discount_type=_UNSET,
        value=_UNSET,
        min_amount=_UNSET,
        max_discount=_UNSET,
        description=_UNSET,
        usage_limit=_UNSET,
        valid_from=_UNSET,
        valid_until=_UNSET,
        is_active=_UNSET,
    ):
        """Partial update; arguments left out keep their current value."""
        changes = {
            "discount_type": discount_type,
            "value": value,
            "min_amount": min_amount,
            "max_discount": max_discount,
            "description": description,
            "usage_limit": usage_limit,
            "valid_from": valid_from,
            "valid_until": valid_until,
            "is_active": is_active,
        }
        with atomic_change(self):
            for field_name, new_value in changes.items():
                if new_value is _UNSET:
                    continue
                if field_name in ("valid_from", "valid_until"):
                    new_value = as_utc(new_value)
                setattr(self, field_name, new_value)

        self.updated_at = datetime.now(UTC)
        self.raise_(DiscountCodeUpdated(discount_code_id=str(self.id), code=self.code, is_active=str(self.is_active)))

    # -------------------------------------------------------------------
    # Availability
    # -------------------------------------------------------------------
    def unavailable_reason(self, order_amount: float | None = None, at: datetime | None = None) -> str | None:
        """Why the code cannot be used right now, or ``None`` when it can."""
        now = as_utc(at) or datetime.now(UTC)
        if not self.is_active:
            return INVALID_CODE_MESSAGE
        if self.valid_from and now < as_utc(self.valid_from):
            return EXPIRED_CODE_MESSAGE
        if self.valid_until and now > as_utc(self.valid_until):
            return EXPIRED_CODE_MESSAGE
        if self.usage_limit is not None and (self.usage_count or 0) >= self.usage_limit:
            return EXHAUSTED_CODE_MESSAGE
        if order_amount is not None and order_amount < (self.min_amount or 0):
            return f"This code requires a minimum order of {format_price(self.min_amount)}."
        return None

    def is_available(self, at: datetime | None = None) -> bool:
        return self.unavailable_reason(at=at) is None

    def discount_on(self, order_amount: float) -> float:
        return discount_for(self.discount_type, self.value, order_amount, self.max_discount)

    @property
    def display_value(self) -> str:
        if self.discount_type == DiscountType.PERCENTAGE.value:
            return f"{self.value:g}% OFF"
        return f"{format_price(self.value)} OFF"

    def days_until_expiry(self, at: datetime | None = None) -> int | None:
        """Whole days left before ``valid_until``, rounded up; ``None`` if open-ended."""
        if not self.valid_until:
            return None
        now = as_utc(at) or datetime.now(UTC)
        remaining = (as_utc(self.valid_until) - now).total_seconds()
        return math.ceil(remaining / 86400)

    # -------------------------------------------------------------------
    # Redemption
    # -------------------------------------------------------------------
    def record_usage(self, order_id, discount_amount, customer_id=None):
        if any(str(usage.order_id) == str(order_id) for usage in self.usages):
            return

        now = datetime.now(UTC)
        self.add_usages(
            DiscountUsage(
                customer_id=customer_id,
                order_id=order_id,
                discount_amount=discount_amount,
                used_at=now,
            )
        )
        self.usage_count = (self.usage_count or 0) + 1
        self.updated_at = now

        self.raise_(
            DiscountCodeRedeemed(
                discount_code_id=str(self.id),
                code=self.code,
                order_id=str(order_id),
                customer_id=str(customer_id) if customer_id else None,
                discount_amount=discount_amount,
                usage_count=self.usage_count,
            )
        )

    @property
    def total_savings(self) -> float:
        return round(sum(usage.discount_amount or 0 for usage in self.usages), 2)
