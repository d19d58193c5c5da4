"""Read-side views over discount codes: the storefront banner and seller statistics."""

from collections import Counter
from datetime import UTC, datetime

from protean.utils.globals import current_domain

from marketplace.promotions.discount_code import DiscountCode


def describe_code(discount: DiscountCode, at: datetime | None = None) -> dict:
    at = at or datetime.now(UTC)
    return {
        "id": str(discount.id),
        "code": discount.code,
        "discount_type": discount.discount_type,
        "value": discount.value,
        "display_value": discount.display_value,
        "min_amount": discount.min_amount,
        "max_discount": discount.max_discount,
        "description": discount.description,
        "usage_limit": discount.usage_limit,
        "usage_count": discount.usage_count or 0,
        "valid_from": discount.valid_from,
        "valid_until": discount.valid_until,
        "is_active": discount.is_active,
        "is_available": discount.is_available(at=at),
        "days_until_expiry": discount.days_until_expiry(at=at),
    }


def active_codes(at: datetime | None = None) -> list[dict]:
    """Active codes for the storefront banner, available ones first, soonest expiry first."""
    codes = [describe_code(d, at) for d in current_domain.repository_for(DiscountCode).newest_first() if d.is_active]
    return sorted(
        codes,
        key=lambda c: (not c["is_available"], c["days_until_expiry"] is None, c["days_until_expiry"] or 0),
    )


def discount_stats(top: int = 5) -> dict:
    codes = current_domain.repository_for(DiscountCode).newest_first()
    usage = Counter({d.code: d.usage_count or 0 for d in codes})
    return {
        "total_codes": len(codes),
        "active_codes": sum(1 for d in codes if d.is_active),
        "total_usage": sum(usage.values()),
        "total_savings": round(sum(d.total_savings for d in codes), 2),
        "popular_codes": [
            {"code": code, "usage_count": count} for code, count in usage.most_common(top) if count > 0
        ],
    }
