"""Order total arithmetic: subtotal, discount, donation and the amount charged."""

from dataclasses import dataclass

from marketplace.shared.money import round_amount

DONATION_PRESETS = (100, 200, 500, 1000)


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: float
    delivery_fee: float
    discount_amount: float
    donation_amount: float
    total: float


def discount_for(discount_type: str, value: float, order_amount: float, max_discount: float | None = None) -> float:
    """Amount taken off ``order_amount`` by a percentage or fixed discount."""
    if discount_type == "percentage":
        amount = order_amount * value / 100
        if max_discount:
            amount = min(amount, max_discount)
    else:
        amount = value
    return round_amount(amount)


def final_total(subtotal: float, discount_amount: float = 0, donation_amount: float = 0) -> float:
    """Subtotal minus discount plus donation, never below zero."""
    return round_amount(max(0.0, subtotal - discount_amount + donation_amount))


def price_breakdown(
    subtotal: float, delivery_fee: float = 0, discount_amount: float = 0, donation_amount: float = 0
) -> PriceBreakdown:
    gross = subtotal + delivery_fee
    return PriceBreakdown(
        subtotal=round_amount(subtotal),
        delivery_fee=round_amount(delivery_fee),
        discount_amount=round_amount(discount_amount),
        donation_amount=round_amount(donation_amount),
        total=final_total(gross, discount_amount, donation_amount),
    )


def toggle_donation_preset(current: float, preset: float) -> float:
    """Selecting the preset that is already selected clears the donation."""
    return 0 if current == preset else preset


def parse_custom_donation(raw) -> float:
    """Amounts typed by the shopper; anything that is not a positive number counts as zero."""
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        return 0
    if amount != amount or amount <= 0:  # NaN
        return 0
    return amount
