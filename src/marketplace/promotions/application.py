"""Applying a discount code to an order amount at checkout."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from marketplace.promotions.discount_code import INVALID_CODE_MESSAGE, DiscountCode


@dataclass(frozen=True)
class DiscountApplicationResult:
    success: bool
    discount_amount: float = 0.0
    message: str = ""
    code: str | None = None
    discount_code_id: str | None = None


def apply_code(code: str, order_amount: float) -> DiscountApplicationResult:
    """Work out what ``code`` takes off ``order_amount``.

    Never raises for a bad code; the result carries the message to show
    the shopper instead.
    """
    normalized = (code or "").strip().upper()
    if not normalized:
        return DiscountApplicationResult(success=False, message=INVALID_CODE_MESSAGE)

    discount = current_domain.repository_for(DiscountCode).find_by_code(normalized)
    if discount is None:
        return DiscountApplicationResult(success=False, message=INVALID_CODE_MESSAGE, code=normalized)

    reason = discount.unavailable_reason(order_amount=order_amount)
    if reason is not None:
        return DiscountApplicationResult(success=False, message=reason, code=normalized)

    return DiscountApplicationResult(
        success=True,
        discount_amount=discount.discount_on(order_amount),
        message=discount.description or f"{discount.display_value} applied",
        code=discount.code,
        discount_code_id=str(discount.id),
    )
